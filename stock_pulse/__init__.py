"""
Global Stock Pulse
Gemini を使った市場概況・個別銘柄分析ダッシュボード。
"""
