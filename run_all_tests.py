#!/usr/bin/env python3

import subprocess
import sys
import os

TEST_DIR = os.path.join("engine_py", "src", "bluff_engine", "tests")

TEST_SUITES = [
    ("Deck and dealing", os.path.join(TEST_DIR, "test_deck.py")),
    ("Configuration", os.path.join(TEST_DIR, "test_rules.py")),
    ("Claim validation", os.path.join(TEST_DIR, "test_validate.py")),
    ("Agents", os.path.join(TEST_DIR, "test_agents.py")),
    ("Engine", os.path.join(TEST_DIR, "test_engine.py")),
    ("Notifications", os.path.join(TEST_DIR, "test_events.py")),
    ("Match runner", os.path.join(TEST_DIR, "test_runner.py")),
    ("Smoke", os.path.join("engine_py", "test_engine.py")),
]


def run_test_suite(test_file):
    """Run one pytest module and return the results"""
    print(f"\n{'='*60}")
    print(f"Running {test_file}...")
    print(f"{'='*60}")

    try:
        result = subprocess.run([sys.executable, "-m", "pytest", "-q", test_file],
                              capture_output=True, text=True, timeout=300)

        if result.returncode == 0:
            print("✅ Test suite completed successfully")
            return True, result.stdout
        else:
            print("❌ Test suite failed")
            return False, result.stdout + result.stderr
    except subprocess.TimeoutExpired:
        print("⏰ Test suite timed out")
        return False, "Test suite timed out after 5 minutes"


def main():
    """Run all test suites and provide summary"""
    print("🎮 Truth or Bluff Engine - Complete Test Suite")
    print("=" * 60)

    results = []

    for label, test_file in TEST_SUITES:
        if os.path.exists(test_file):
            success, output = run_test_suite(test_file)
            if not success:
                print(output)
            results.append((label, success))
        else:
            print(f"❌ Test file {test_file} not found")
            results.append((label, False))

    # Print summary
    print(f"\n{'='*60}")
    print("📊 TEST SUMMARY")
    print(f"{'='*60}")

    all_passed = True
    for label, success in results:
        status = "✅ PASSED" if success else "❌ FAILED"
        print(f"{label}: {status}")
        if not success:
            all_passed = False

    print(f"\n{'='*60}")
    if all_passed:
        print("🎉 ALL TEST SUITES PASSED!")
    else:
        print("⚠️  SOME TEST SUITES FAILED")
        print("Please check the output above for details")

    print(f"{'='*60}")

    # Return appropriate exit code
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
