#!/usr/bin/env python3
"""執行所有品質檢查：格式、匯入排序、靜態分析與單元測試。

依序執行 black、isort、ruff、pylint、pytest，最後輸出總結。
加上 `--fix` 參數時，black 與 isort 會直接改寫檔案而非只檢查。
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent
PACKAGES = ["app", "core", "infrastructure", "tests", "main.py"]


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """執行命令並返回成功狀態和輸出。"""
    print(f"\n{'=' * 60}")
    print(f"執行: {description}")
    print(f"命令: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"❌ 執行錯誤: {e}")
        return False, str(e)

    output = result.stdout + result.stderr
    success = result.returncode == 0
    print("✅ 成功" if success else "❌ 失敗")
    if output.strip():
        print(output)
    return success, output


def build_commands(fix: bool) -> list[tuple[list[str], str]]:
    py = sys.executable
    black = [py, "-m", "black", *PACKAGES] + ([] if fix else ["--check"])
    isort = [py, "-m", "isort", *PACKAGES] + ([] if fix else ["--check-only"])
    return [
        (black, "Black 格式化" if fix else "Black 格式化檢查"),
        (isort, "isort 匯入排序" if fix else "isort 匯入排序檢查"),
        ([py, "-m", "ruff", "check", *PACKAGES], "Ruff 靜態檢查"),
        ([py, "-m", "pylint", "app", "core", "infrastructure"], "Pylint 靜態分析"),
        ([py, "-m", "pytest", "-q"], "pytest 單元測試"),
    ]


def main() -> None:
    fix = "--fix" in sys.argv[1:]
    results = [(desc, *run_command(cmd, desc)) for cmd, desc in build_commands(fix)]

    print(f"\n{'=' * 60}")
    print("總結報告")
    print("=" * 60)
    for description, success, _ in results:
        print(f"{description}: {'✅ 通過' if success else '❌ 失敗'}")

    all_passed = all(success for _, success, _ in results)
    print(f"\n整體結果: {'✅ 全部通過' if all_passed else '❌ 有錯誤'}")
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
