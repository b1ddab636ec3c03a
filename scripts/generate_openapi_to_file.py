"""Script to write the API's openapi.yaml to a persistent location for inspection."""
import argparse
import yaml
from pathlib import Path
from repairdesk.main import app


def export_openapi(out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(yaml.safe_dump(app.openapi(), sort_keys=False), encoding="utf-8")
    return out_path


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--out",
        type=Path,
        default=Path(__file__).parent.parent / "build" / "openapi.yaml",
        help="Destination file",
    )
    args = parser.parse_args()
    path = export_openapi(args.out)
    print(f"Wrote {path} ({path.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
