"""
Targeting orchestration.

ResumeTargeter owns the collaborators, the prepared content bank and the
policy config, and runs the full pipeline for one or many job descriptions:

    posting -> JobDescription (embeddings + entities) + TfIdfIndex
            -> score_lines -> select_top_lines -> annotate_selection

Batch runs isolate failures: a job description that cannot be processed is
logged, recorded in the report, and skipped.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from quiver.contexts.intake import ContentBank, JobDescriptionError, JobPosting
from quiver.contexts.targeting.collaborators import Embedder, EntityExtractor
from quiver.contexts.targeting.config import TargetingConfig
from quiver.contexts.targeting.exceptions import CollaboratorError
from quiver.contexts.targeting.logger import (
    _log_info,
    log_targeting_failure,
    log_targeting_result,
    log_targeting_start,
)
from quiver.contexts.targeting.scoring import score_lines
from quiver.contexts.targeting.selection import (
    annotate_selection,
    rank_lines,
    select_top_lines,
)
from quiver.contexts.targeting.skills import find_relevant_skills
from quiver.contexts.targeting.targeting_data_structures import (
    CandidateLine,
    JobDescription,
    TargetedResume,
)
from quiver.contexts.targeting.tfidf import TfIdfIndex

# Errors that skip one job description instead of aborting a batch
ISOLATED_ERRORS = (JobDescriptionError, CollaboratorError)


@dataclass
class TargetingReport:
    """
    Outcome of a batch run.

    Attributes:
        results: Successful targeting results in input order
        failures: Job identifier (or path) -> error for skipped descriptions
    """

    results: List[TargetedResume] = field(default_factory=list)
    failures: Dict[str, Exception] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class ResumeTargeter:
    """
    Scores and selects content-bank lines for job descriptions.

    Attributes:
        bank: Source content bank
        config: Policy and collaborator settings
        candidate_lines: Bank lines with embeddings and entity graphs
    """

    def __init__(
        self,
        bank: ContentBank,
        embedder: Embedder,
        extractor: EntityExtractor,
        config: Optional[TargetingConfig] = None,
    ):
        """
        Prepare every content-bank line up front.

        Raises:
            EmbeddingError, EntityExtractionError: If a bank line cannot be prepared
        """
        self.bank = bank
        self.embedder = embedder
        self.extractor = extractor
        self.config = config or TargetingConfig()
        self.candidate_lines = self.prepare_candidate_lines()

    def prepare_candidate_lines(self) -> List[CandidateLine]:
        """
        Embed every bank line and build its entity graph.

        Uses config.max_workers threads; results keep bank order either way.
        """
        _log_info(f"Precomputing embeddings and entities for {len(self.bank.lines)} lines")

        def prepare(bank_line):
            return CandidateLine.from_bank_line(bank_line, self.embedder, self.extractor)

        if self.config.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                return list(pool.map(prepare, self.bank.lines))
        return [prepare(bank_line) for bank_line in self.bank.lines]

    def describe(self, posting: JobPosting) -> JobDescription:
        """Build the embedded form of a posting."""
        return JobDescription.from_posting(posting, self.embedder, self.extractor)

    def target(self, posting: JobPosting) -> TargetedResume:
        """
        Run the full pipeline for one job posting.

        Raises:
            EmbeddingError, EntityExtractionError: If a collaborator fails
        """
        start = time.time()
        jd = self.describe(posting)
        tfidf = TfIdfIndex.from_documents(jd.sentences)
        log_targeting_start(posting.identifier, len(jd.sentences), len(jd.entities))

        scored = score_lines(self.candidate_lines, jd, tfidf, self.config)
        skills = find_relevant_skills(
            jd.entities, self.bank.skills, jd.raw_text, self.config.skill_vocabulary
        )
        selected = select_top_lines(
            scored,
            minimum_score=self.config.minimum_relevance_score,
            max_per_category=self.config.max_lines_per_category,
        )

        result = TargetedResume(
            identifier=posting.identifier,
            company=posting.company,
            role=posting.role,
            selected_lines=annotate_selection(selected, skills, self.config.emphasis_template),
            relevant_skills=skills,
            scored_lines=rank_lines(scored),
        )
        log_targeting_result(result, time.time() - start)
        return result

    def target_file(self, path: Path) -> TargetedResume:
        """Load a job description file and target it."""
        return self.target(JobPosting.from_file(path))

    def target_all(self, paths: Iterable[Path]) -> TargetingReport:
        """
        Target many job description files, isolating per-file failures.

        Returns:
            TargetingReport with results and failures keyed by file stem
        """
        report = TargetingReport()
        for path in paths:
            path = Path(path)
            try:
                report.results.append(self.target_file(path))
            except ISOLATED_ERRORS as e:
                log_targeting_failure(path.stem, e)
                report.failures[path.stem] = e

        _log_info(f"Targeted {len(report.results)} job descriptions, {len(report.failures)} failed")
        return report
