"""
ローカル品質チェック
ruff によるフォーマット・Lint と pytest を順に実行します。
"""
import os
import subprocess
import sys

STEPS = [
    ("ruff format stock_pulse tests app.py", "Formatting code"),
    ("ruff check stock_pulse tests app.py --fix", "Linting & Fixing code"),
]


def run_command(command, description):
    print(f"\n[check] Executing: {description}...")
    result = subprocess.run(command, shell=True, check=False, text=True)
    if result.returncode != 0:
        print(f"FAILED: {description} failed or found issues.")
        return False
    print(f"PASSED: {description} passed.")
    return True


def main():
    print("Starting Global Stock Pulse checks...")

    try:
        subprocess.run(["ruff", "--version"], check=True, capture_output=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        print("ruff not found. Install the test extra: pip install -e .[test]")
        sys.exit(1)

    results = [run_command(command, description) for command, description in STEPS]

    if os.path.isdir("tests"):
        results.append(
            run_command(f"{sys.executable} -m pytest", "Running tests")
        )
    else:
        print("INFO: 'tests' directory not found. Skipping tests.")

    if not all(results):
        print("\nChecks completed with issues.")
        sys.exit(1)
    print("\nAll checks passed! Code is clean.")


if __name__ == "__main__":
    main()
