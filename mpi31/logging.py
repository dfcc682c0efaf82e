"""
Structured logging for mpi31 verification and benchmark runs.

Produces:
  - manifest.json:  One-time run metadata (git hash, config, host info)
  - results.jsonl:  One record per verification case
  - metrics.jsonl:  Timing and performance metrics
"""

import json
import os
import hashlib
import platform
import subprocess
import sys
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any

import numpy as np


@dataclass
class RunManifest:
    """Run-level metadata, saved once per run."""
    run_id: str
    timestamp: str
    git_commit: str
    config_hash: str
    node_name: str
    python_version: str
    numpy_version: str
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown'."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True, text=True, timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    return result.stdout.strip() if result.returncode == 0 else "unknown"


def _config_hash(config: Dict[str, Any]) -> str:
    """Deterministic hash of config dict."""
    s = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def create_manifest(run_id: str, config: Dict[str, Any]) -> RunManifest:
    """Create a RunManifest with auto-detected metadata."""
    return RunManifest(
        run_id=run_id,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        git_commit=_get_git_commit(),
        config_hash=_config_hash(config),
        node_name=os.environ.get("HOSTNAME", platform.node()),
        python_version=sys.version,
        numpy_version=np.__version__,
        config=config,
    )


class RunLogger:
    """Structured JSONL logger for one verification run.

    Writes two files:
      - results.jsonl  (every case, or failures only with failures_only=True)
      - metrics.jsonl  (timing / perf data)
    """

    def __init__(self, output_dir: Path, failures_only: bool = False):
        self.output_dir = Path(output_dir)
        self.failures_only = failures_only

        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._results_path = self.output_dir / "results.jsonl"
        self._metrics_path = self.output_dir / "metrics.jsonl"

        # Append mode so repeated runs accumulate
        self._results_f = open(self._results_path, 'a')
        self._metrics_f = open(self._metrics_path, 'a')

        self._results_count = 0
        self._failures_count = 0

    def log_result(self, record: Dict[str, Any]):
        """Log one verification case; ``record['passed']`` is required."""
        passed = bool(record["passed"])
        if not passed:
            self._failures_count += 1
        if passed and self.failures_only:
            return
        record["timestamp"] = time.time()
        self._results_f.write(json.dumps(record, default=str) + "\n")
        self._results_count += 1

        # Failures are flushed at once, passes periodically
        if not passed or self._results_count % 100 == 0:
            self._results_f.flush()

    def log_metrics(self, record: Dict[str, Any]):
        """Log timing / performance metrics."""
        record["timestamp"] = time.time()
        self._metrics_f.write(json.dumps(record, default=str) + "\n")
        self._metrics_f.flush()

    def close(self):
        """Flush and close all log files."""
        for f in [self._results_f, self._metrics_f]:
            if not f.closed:
                f.flush()
                f.close()

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "results_logged": self._results_count,
            "failures": self._failures_count,
        }

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
