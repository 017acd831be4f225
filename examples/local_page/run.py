from pathlib import Path

from swiftcheck.cli.main import main


def run() -> int:
    here = Path(__file__).resolve().parent
    return main(
        [
            "run",
            "--suite",
            str(here / "suite.yaml"),
            "--base-url",
            (here / "index.html").as_uri(),
        ]
    )


if __name__ == "__main__":
    raise SystemExit(run())
