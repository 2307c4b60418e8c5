"""Run all tests for UnrealAssetScanner."""

import sys
from pathlib import Path

import pytest


def main() -> int:
    """Run the test suite with pytest."""
    print("Running UnrealAssetScanner Test Suite")
    print("=" * 60)
    tests_dir = Path(__file__).parent / "tests"
    return pytest.main([str(tests_dir), "-v", "--tb=short"])


if __name__ == "__main__":
    sys.exit(main())
