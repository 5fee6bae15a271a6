"""Development script to run checks (formatting, linting, tests) and a CLI smoke run."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally the CLI smoke run."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a CLI smoke run."
    )
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Check formatting and lint without fixing, then run tests only",
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    else:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )

    run_command(
        ["uv", "run", "pytest", "--cov=selector_request", "--cov-report=term-missing"],
        "Tests",
    )

    if args.ci:
        print("\n✅ CI checks passed successfully. Skipping CLI smoke run.")
        return

    run_command(
        [
            "uv",
            "run",
            "python",
            "-m",
            "selector_request",
            "--base",
            "https://example.com/docs/",
            "../table#(selector=tr:nth-child(2))",
            "#(selector=p)",
        ],
        "CLI Smoke Run",
    )

    print("\n✅ All development checks and the CLI smoke run passed successfully.")


if __name__ == "__main__":
    main()
