"""Orchestration utilities for running the packaging pipeline.

The CLI lives in packager.orchestrator.run_pipeline and is not re-exported here, so that
lower layers can import the artifact store without pulling in the whole pipeline.
"""

from packager.orchestrator.artifact_store import DigestRecord, file_digest, record_digest
from packager.orchestrator.config_loader import PackagingConfig, load_packaging_config
from packager.orchestrator.run_context import PackagingContext

__all__ = [
    "DigestRecord",
    "PackagingConfig",
    "PackagingContext",
    "file_digest",
    "load_packaging_config",
    "record_digest",
]
