"""Package verification script.

Checks that an archive produced by the packager is a readable zip and that the digest
file next to it holds the archive's lowercase hex digest followed by a newline.

Usage: python scripts/verify_package.py <archive.zip> [checksum.txt]
"""
from pathlib import Path
import sys

from packager.validator.package_validator import verify_package


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or len(args) > 2:
        print("Usage: python scripts/verify_package.py <archive.zip> [checksum.txt]", file=sys.stderr)
        return 2
    archive = Path(args[0])
    digest = Path(args[1]) if len(args) == 2 else Path("checksum.txt")

    check = verify_package(archive, digest)
    for issue in check.issues:
        print(f"{issue.code}: {issue.message}")
    if check.ok:
        print(f"OK: {archive} ({check.algorithm})")
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
