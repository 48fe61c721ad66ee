"""
Global Constants for Global Stock Pulse.
"""

# AI Configuration
GEMINI_MODEL_NAME = "gemini-3-pro-preview"

# Response format requested from Gemini
RESPONSE_MIME_TYPE = "application/json"

# 分析画面に表示する参照ソースの上限
MAX_DISPLAYED_SOURCES = 3

# User-facing messages
OVERVIEW_ERROR_MESSAGE = "Failed to load market overview. The AI service might be busy."
ANALYSIS_ERROR_MESSAGE = "Unable to analyze stock. Please verify the stock ID and try again."
FALLBACK_SENTIMENT = "Unable to retrieve real-time market data. Please try again later."
