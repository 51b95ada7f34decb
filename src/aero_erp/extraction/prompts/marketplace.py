"""Prompts for marketplace copywriting and free-text product capture."""

DESCRIPTION_PROMPT = """You are an expert e-commerce copywriter for cross-border marketplaces.
Write a compelling, SEO-optimized product description in Simplified Chinese
for a product named "{name}".
Key features to highlight: {features}.
Tone: {tone}.
Format: plain text, at most 2 paragraphs. No markdown, no headings."""


TITLE_PROMPT = """Act as an Amazon / TikTok Shop SEO expert.
Optimize this product title for click-through rate and search visibility.
Original name: "{name}"
Keywords to include: "{keywords}"
Target audience: global English-speaking market.
Output ONLY the optimized title, no explanation, at most 100 characters."""


PRODUCT_CAPTURE_PROMPT = """You turn a seller's free-text notes about a product into ONE JSON object.

Use these keys when the information is present, omit them otherwise:
- sku, name, description, category, supplier, note
- price (selling price, number), currency (USD, EUR, CNY or JPY), stock (integer)
- unitWeight (kg), boxLength, boxWidth, boxHeight (cm), boxWeight (kg), itemsPerBox
- financials: {costOfGoods (RMB), shippingCost (USD), adCost (USD)}
- logistics: {method (Air, Sea or Rail), carrier, trackingNo}

Rules:
- NEVER invent values that are not in the notes
- Numbers must be plain JSON numbers (no currency symbols)
- Return ONLY the JSON object, no markdown and no extra text"""
