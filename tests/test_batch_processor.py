"""
Test batch scoring of profile snapshot files, including error handling,
ZIP loading and DataFrame export.
"""

import io
import json
import os
import tempfile
import unittest
import zipfile

from role_batch_processor import RoleBatchProcessor
from zkrole_engine.scoring.scoring_engine import ScoringEngine


def _snapshot(github, onchain, **extra):
    data = {"github": github, "onchain": onchain}
    data.update(extra)
    return json.dumps(data).encode("utf-8")


class TestProcessBatch(unittest.TestCase):
    """Test batch statistics and per-file error capture."""

    def setUp(self):
        self.processor = RoleBatchProcessor()
        self.files = [
            ("alice.json", _snapshot(
                {"totalContributions": 2000, "mergedPullRequests": 40},
                {},
            )),
            ("bob.json", _snapshot(
                {},
                {"nativeBalance": "15", "transactionCount": 600, "hasNFTs": True,
                 "tokenBalances": [{"symbol": "USDC", "balance": 30000}]},
                profile_ref="wallet-0xb0b",
            )),
            ("carol.json", _snapshot({}, {})),
            ("broken.json", b"{not json"),
            ("list.json", b"[1, 2, 3]"),
        ]

    def test_stats(self):
        batch = self.processor.process_batch(self.files)
        stats = batch.stats

        self.assertEqual(stats.total_files, 5)
        self.assertEqual(stats.processed, 5)
        self.assertEqual(stats.successful, 3)
        self.assertEqual(stats.failed, 2)
        self.assertEqual(stats.role_counts["Contributor"], 1)
        self.assertEqual(stats.role_counts["Investor"], 1)
        self.assertEqual(stats.role_counts["Newcomer"], 1)
        self.assertEqual(stats.role_counts["Founder"], 0)
        self.assertEqual(stats.min_score, 0)
        self.assertEqual(stats.max_score, 161)
        self.assertAlmostEqual(stats.success_rate, 60.0)
        self.assertGreaterEqual(stats.processing_time, 0.0)

    def test_errors_are_recorded_not_raised(self):
        batch = self.processor.process_batch(self.files)
        self.assertEqual(batch.error_summary, {"JSON_PARSE_ERROR": 1, "INVALID_JSON_STRUCTURE": 1})
        self.assertEqual([error.file_name for error in batch.errors], ["broken.json", "list.json"])

    def test_profile_refs(self):
        batch = self.processor.process_batch(self.files)
        refs = [profile.profile_ref for profile in batch.results]
        self.assertEqual(refs, ["alice", "wallet-0xb0b", "carol"])

    def test_progress_callback(self):
        calls = []
        self.processor.process_batch(self.files[:2], progress_callback=lambda *args: calls.append(args))
        self.assertEqual(calls, [
            (1, 2, "Processing: alice.json"),
            (2, 2, "Processing: bob.json"),
        ])

    def test_empty_batch(self):
        batch = self.processor.process_batch([])
        self.assertEqual(batch.stats.average_score, 0.0)
        self.assertEqual(batch.stats.success_rate, 0.0)
        self.assertEqual(batch.results, [])

    def test_threshold_engine(self):
        processor = RoleBatchProcessor(engine=ScoringEngine(classifier="thresholds"))
        batch = processor.process_batch([("carol.json", _snapshot({}, {}))])
        self.assertEqual(batch.results[0].result.role.value, "Contributor")

    def test_latin1_content(self):
        content = '{"github": {"totalContributions": 150}, "onchain": {}, "profile_ref": "café"}'.encode("latin-1")
        batch = self.processor.process_batch([("latin.json", content)])
        self.assertEqual(batch.stats.successful, 1)
        self.assertEqual(batch.results[0].profile_ref, "café")


class TestDataFrames(unittest.TestCase):
    """Test pandas export."""

    def setUp(self):
        self.processor = RoleBatchProcessor()
        self.batch = self.processor.process_batch([
            ("alice.json", _snapshot({"totalContributions": 2000}, {})),
            ("bad.json", b"nope"),
        ])

    def test_results_dataframe(self):
        df = self.processor.results_to_dataframe(self.batch.results)
        self.assertEqual(len(df), 1)
        for column in ("Profile Ref", "Role", "Role Confidence", "Total Score",
                       "GitHub Activity", "GitHub Collaboration", "Onchain Wealth", "Onchain Governance"):
            self.assertIn(column, df.columns)
        self.assertEqual(df.iloc[0]["Role"], "Contributor")
        self.assertEqual(df.iloc[0]["Total Score"], 65)

    def test_errors_dataframe(self):
        df = self.processor.errors_to_dataframe(self.batch.errors)
        self.assertEqual(list(df.columns), ["File Name", "Error Type", "Error Message", "Timestamp"])
        self.assertEqual(df.iloc[0]["Error Type"], "JSON_PARSE_ERROR")


class TestLoadFiles(unittest.TestCase):
    """Test reading JSON files and ZIP archives from disk."""

    def test_load_json_and_zip(self):
        processor = RoleBatchProcessor()
        with tempfile.TemporaryDirectory() as tmp:
            json_path = os.path.join(tmp, "dave.json")
            with open(json_path, "wb") as f:
                f.write(_snapshot({}, {}))

            buffer = io.BytesIO()
            with zipfile.ZipFile(buffer, "w") as zf:
                zf.writestr("profiles/erin.json", _snapshot({"followers": 3}, {}))
                zf.writestr("profiles/readme.txt", "skip me")
                zf.writestr("profiles/", "")
            zip_path = os.path.join(tmp, "batch.zip")
            with open(zip_path, "wb") as f:
                f.write(buffer.getvalue())

            notes_path = os.path.join(tmp, "notes.txt")
            with open(notes_path, "w") as f:
                f.write("ignored")

            files = processor.load_files([json_path, zip_path, notes_path])

        self.assertEqual([name for name, _ in files], ["dave.json", "erin.json"])
        batch = processor.process_batch(files)
        self.assertEqual(batch.stats.successful, 2)


if __name__ == "__main__":
    unittest.main()
