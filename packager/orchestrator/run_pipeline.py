"""
    DESCRIPTION
    -----------
    run_pipeline is the CLI entrypoint for packaging a source tree.

Stages, strictly sequential:
- Tree transform: mirror source -> output, minifying *.json
- Archive: zip the output tree via the configured compression strategy
- Digest: hash the archive and persist the hex digest under a fixed filename
    """

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from packager.archiver.compressor import build_archive
from packager.errors import PackagingError
from packager.orchestrator.artifact_store import DigestRecord, atomic_write_json, record_digest
from packager.orchestrator.config_loader import PackagingConfig, load_packaging_config
from packager.orchestrator.logger import configure_logging
from packager.orchestrator.run_context import PackagingContext
from packager.transformer.timestamps import normalize_mtimes, resolve_fixed_mtime
from packager.transformer.tree_walker import TransformReport, transform_tree

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


#note: Everything a caller (CLI, tests) needs to know about a finished run.
@dataclass(frozen=True)
class PackagingResult:
    context: PackagingContext
    report: TransformReport
    digest: DigestRecord

    def as_dict(self) -> Dict[str, Any]:
        return {
            "source_dir": str(self.context.source_root),
            "output_dir": str(self.context.output_root),
            "archive_path": str(self.context.archive_path),
            "digest": {
                "algorithm": self.digest.algorithm,
                "hexdigest": self.digest.hexdigest,
                "path": str(self.digest.path),
            },
            "transform": self.report.as_dict(),
        }


#note: Headless entrypoint for tests; raises PackagingError / OSError on fatal failures.
def run_pipeline(
    source_dir: Path,
    output_dir: Path,
    archive_path: Path,
    *,
    config: Optional[PackagingConfig] = None,
    cwd: Optional[Path] = None,
) -> PackagingResult:
    cfg = config or PackagingConfig()
    ctx = PackagingContext.resolve(source_dir, output_dir, archive_path, cwd=cwd)

    ctx.ensure_output_root()
    prune = (ctx.output_root,) if ctx.output_inside_source else ()
    report = transform_tree(
        ctx.source_root,
        ctx.output_root,
        excluded_dirs=cfg.excluded_dirs,
        prune_paths=prune,
    )
    logger.info(
        "Transformed %d file(s): %d copied, %d minified, %d skipped",
        report.files_written,
        len(report.copied),
        len(report.minified),
        len(report.skipped),
    )

    if cfg.normalize_mtime:
        normalize_mtimes(ctx.output_root, resolve_fixed_mtime())

    logger.info("Zipping...")
    build_archive(
        ctx.output_root,
        ctx.archive_path,
        strategy=cfg.archiver_strategy,
        executable=cfg.archiver_executable,
    )

    digest = record_digest(
        ctx.archive_path,
        algorithm=cfg.digest_algorithm,
        digest_dir=ctx.digest_dir,
        filename=cfg.digest_filename,
    )
    return PackagingResult(context=ctx, report=report, digest=digest)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packager",
        description="Mirror a source tree with minified JSON, zip it and record the archive digest.",
    )
    parser.add_argument("source_dir", type=Path, help="Directory to package.")
    parser.add_argument("output_dir", type=Path, help="Directory receiving the transformed tree.")
    parser.add_argument("archive_path", type=Path, help="Zip file to create or overwrite.")
    parser.add_argument("--config", dest="config", type=Path, default=None, help="YAML packaging config.")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Overrides logging.level.")
    parser.add_argument(
        "--manifest",
        dest="manifest",
        type=Path,
        default=None,
        help="Write a JSON summary of the run to this path.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    #note: argparse exits with status 2 on missing arguments, before anything touches the disk.
    args = build_parser().parse_args(argv)

    try:
        config = load_packaging_config(args.config)
    except PackagingError as exc:
        configure_logging(args.log_level or "INFO")
        logger.error("Packaging failed: %s", exc)
        return EXIT_FAILURE

    configure_logging(args.log_level or config.log_level, config.log_file)
    for source in config.sources:
        logger.debug("Loaded config from %s", source)

    try:
        result = run_pipeline(args.source_dir, args.output_dir, args.archive_path, config=config)
        if args.manifest is not None:
            atomic_write_json(args.manifest, result.as_dict())
    except (PackagingError, OSError) as exc:
        logger.error("Packaging failed: %s", exc)
        return EXIT_FAILURE

    print(f"{result.digest.algorithm.upper()}: {result.digest.hexdigest}")
    print(f"Digest file: {result.digest.path}")
    print(f"Done. Output folder: {result.context.output_root} | Zip file: {result.context.archive_path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
