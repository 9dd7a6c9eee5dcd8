"""
Role Batch Processor for scoring many profile snapshots.
Handles JSON files and ZIP archives with per-file error handling.
"""

import json
import logging
import zipfile
import io
import os
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
import traceback

import pandas as pd

from zkrole_engine.metrics.models import GitHubMetrics, OnchainMetrics
from zkrole_engine.scoring.role_classifier import Role
from zkrole_engine.scoring.scoring_engine import ScoringEngine, ScoreResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class InvalidProfileStructureError(Exception):
    """Raised when a snapshot file is not a JSON object."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class ProfileScore:
    """Scoring result tagged with the snapshot it came from."""
    profile_ref: str
    result: ScoreResult


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    role_counts: Dict[str, int] = field(
        default_factory=lambda: {role.value: 0 for role in Role}
    )

    # Score statistics
    total_score: float = 0.0
    min_score: float = 0.0
    max_score: float = 0.0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def average_score(self) -> float:
        """Calculate average total score."""
        if self.successful == 0:
            return 0.0
        return self.total_score / self.successful

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.successful / self.total_files) * 100

    def record(self, result: ScoreResult) -> None:
        score = result.total_score
        if self.successful == 0:
            self.min_score = score
            self.max_score = score
        else:
            self.min_score = min(self.min_score, score)
            self.max_score = max(self.max_score, score)
        self.total_score += score
        self.successful += 1
        self.processed += 1
        self.role_counts[result.role.value] += 1


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    results: List[ProfileScore]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)


class RoleBatchProcessor:
    """Batch processor for profile snapshot files."""

    def __init__(self, engine: Optional[ScoringEngine] = None):
        """
        Initialize the batch processor.

        Args:
            engine: Configured ScoringEngine (defaults to the standard one)
        """
        self.scoring_engine = engine or ScoringEngine()
        logger.info(
            f"Initialized batch processor: classifier={self.scoring_engine.classifier.name}"
        )

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Score a batch of profile snapshot files.

        Args:
            files: List of (filename, content) tuples; each content is a JSON
                object with "github" and "onchain" sections
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch processing of {len(files)} files")

        for idx, (filename, content) in enumerate(files):
            if progress_callback:
                progress_callback(idx + 1, len(files), f"Processing: {filename}")

            logger.debug(f"Processing file {idx + 1}/{len(files)}: {filename}")

            try:
                profile = self._process_single_profile(filename, content)
            except json.JSONDecodeError as e:
                error = ProcessingError(
                    file_name=filename,
                    error_type="JSON_PARSE_ERROR",
                    error_message=f"Invalid JSON: {str(e)}"
                )
                logger.error(f"JSON parse error in {filename}: {e}")
            except InvalidProfileStructureError as e:
                error = ProcessingError(
                    file_name=filename,
                    error_type="INVALID_JSON_STRUCTURE",
                    error_message=str(e)
                )
                logger.error(f"Invalid JSON structure in {filename}: {e}")
            except Exception as e:
                error = ProcessingError(
                    file_name=filename,
                    error_type="PROCESSING_ERROR",
                    error_message=f"{type(e).__name__}: {str(e)}"
                )
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")
            else:
                results.append(profile)
                stats.record(profile.result)
                continue

            errors.append(error)
            stats.failed += 1
            stats.processed += 1
            error_types[error.error_type] = error_types.get(error.error_type, 0) + 1

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} successful, "
            f"avg score: {stats.average_score:.1f}, time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def _process_single_profile(self, filename: str, content: bytes) -> ProfileScore:
        """Parse and score a single snapshot file."""
        try:
            data = json.loads(content.decode("utf-8"))
        except UnicodeDecodeError:
            # latin-1 accepts all byte values
            data = json.loads(content.decode("latin-1"))

        if not isinstance(data, dict):
            raise InvalidProfileStructureError(
                f"Expected a JSON object with 'github' and 'onchain' sections, got {type(data).__name__}"
            )

        github = GitHubMetrics.from_dict(data.get("github"))
        onchain = OnchainMetrics.from_dict(data.get("onchain"))

        profile_ref = str(data.get("profile_ref") or Path(filename).stem)
        result = self.scoring_engine.score_profile(github, onchain)
        return ProfileScore(profile_ref=profile_ref, result=result)

    def load_files(self, paths: Iterable[str]) -> List[Tuple[str, bytes]]:
        """
        Load snapshot files from disk.
        Handles both JSON files and ZIP archives.

        Args:
            paths: File paths to read

        Returns:
            List of (filename, content) tuples
        """
        all_files = []

        for path in paths:
            filename = os.path.basename(path)

            if filename.lower().endswith(".zip"):
                with open(path, "rb") as f:
                    content = f.read()
                logger.info(f"Extracting ZIP archive: {filename}")
                zip_files = self._extract_zip(content)
                all_files.extend(zip_files)
                logger.info(f"Extracted {len(zip_files)} files from {filename}")

            elif filename.lower().endswith(".json"):
                with open(path, "rb") as f:
                    all_files.append((filename, f.read()))

            else:
                logger.warning(f"Skipping unsupported file: {filename}")

        logger.info(f"Total files loaded: {len(all_files)}")
        return all_files

    def _extract_zip(self, content: bytes) -> List[Tuple[str, bytes]]:
        """Extract JSON files from a ZIP archive."""
        files = []

        with zipfile.ZipFile(io.BytesIO(content), "r") as zf:
            for name in zf.namelist():
                if name.endswith("/") or not name.lower().endswith(".json"):
                    continue
                files.append((os.path.basename(name), zf.read(name)))

        return files

    def results_to_dataframe(self, results: List[ProfileScore]) -> pd.DataFrame:
        """
        Convert scoring results to a pandas DataFrame.

        Args:
            results: List of ProfileScore objects

        Returns:
            pandas DataFrame with one row per profile
        """
        rows = []
        for profile in results:
            result = profile.result
            row = {
                "Profile Ref": profile.profile_ref,
                "Role": result.role.value,
                "Role Confidence": result.role_confidence,
                "Total Score": result.total_score,
                "GitHub Score": result.github_score,
                "Onchain Score": result.onchain_score,
            }
            for category, value in result.breakdown.github.to_dict().items():
                row[f"GitHub {category.title()}"] = value
            for category, value in result.breakdown.onchain.to_dict().items():
                row[f"Onchain {category.title()}"] = value
            rows.append(row)

        return pd.DataFrame(rows)

    def errors_to_dataframe(self, errors: List[ProcessingError]) -> pd.DataFrame:
        """Convert processing errors to a pandas DataFrame."""
        rows = []
        for error in errors:
            rows.append({
                "File Name": error.file_name,
                "Error Type": error.error_type,
                "Error Message": error.error_message,
                "Timestamp": error.timestamp,
            })

        return pd.DataFrame(rows)
