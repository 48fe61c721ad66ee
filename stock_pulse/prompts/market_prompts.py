"""
Gemini Prompts
市場概況・銘柄分析のプロンプトテンプレート。
JSONの波括弧は str.format 用に二重化している。
"""

MARKET_OVERVIEW_PROMPT_TEMPLATE = """
Generate a real-time market overview for the {exchanges} stock market.
Use the Google Search tool to find the latest indices data, market sentiment, and hot industries.

Return the response strictly as a JSON object with the following schema:
{{
  "indices": [
    {{ "name": "Index Name (e.g., S&P 500)", "value": "1234.56", "change": "+0.5%", "trend": "up" | "down" | "neutral" }}
  ],
  "sentiment": "A brief paragraph describing the overall market mood today.",
  "hotIndustries": [
    {{ "name": "Industry Name", "description": "Why it is trending", "momentum": "high" | "medium" | "low" }}
  ],
  "trendingPoint": "The single most important news or trend affecting this market right now.",
  "lastUpdated": "Current Time"
}}
"""

STOCK_ANALYSIS_PROMPT_TEMPLATE = """
Analyze the stock with identifier "{symbol}" in the {market_context}.
Use Google Search to find current price, recent news, and financial health.

Return the response strictly as a JSON object with this schema:
{{
  "symbol": "{symbol}",
  "name": "Company Name",
  "price": "Current Price (with currency symbol)",
  "changePercent": "24h Change % (e.g. +1.2%)",
  "marketCap": "Market Cap",
  "peRatio": "P/E Ratio (or N/A)",
  "sector": "Sector/Industry",
  "summary": "A concise 2-3 sentence summary of the company's current status.",
  "bullCase": ["Reason 1 to buy", "Reason 2 to buy", "Reason 3 to buy"],
  "bearCase": ["Risk 1", "Risk 2", "Risk 3"],
  "verdict": "Buy" | "Sell" | "Hold"
}}
"""
