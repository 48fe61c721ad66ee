"""
起動前の簡易インテグリティチェック
主要モジュールのインポートと、APIキーの有無を確認します。
"""
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

print("Checking critical imports...")

try:
    from stock_pulse.controller import DashboardController
    from stock_pulse.gemini_gateway import GeminiGateway
    from stock_pulse.settings_storage import get_gemini_api_key

    for name in ("select_region", "ensure_overview_loaded", "submit_stock_query", "clear_analysis"):
        assert hasattr(DashboardController, name), name
    for name in ("request_market_overview", "request_stock_analysis"):
        assert hasattr(GeminiGateway, name), name
    print("[OK] controller and gateway verified")
except ImportError as e:
    print(f"[FAIL] ImportError: {e}")
    sys.exit(1)
except AssertionError as e:
    print(f"[FAIL] Missing attribute: {e}")
    sys.exit(1)

if get_gemini_api_key():
    print("[OK] Gemini API key configured")
else:
    print("[WARN] Gemini API key missing: the dashboard will show the configuration screen")

print("Integrity check passed.")
