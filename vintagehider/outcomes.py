#!/usr/bin/env python3
"""
Outcome tally for a hider run

Collects product ids per report category plus the log of mutating API
responses, then writes everything as one JSON report when the run ends.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from vintagehider.classifier import Outcome
from vintagehider.store_client import ApiResponse

logger = logging.getLogger(__name__)

REPORT_PREFIX = 'hide_sold_out_vintage_products'
RESPONSES_KEY = 'responses'


class OutcomeTally:
    """Append-only mapping of outcome category to product ids"""

    def __init__(self):
        self.outcomes: Dict[Outcome, List[Any]] = {outcome: [] for outcome in Outcome}
        self.responses: List[Dict[str, Any]] = []

    def record(self, outcome: Outcome, product_id):
        self.outcomes[Outcome(outcome)].append(product_id)

    def record_response(self, response: ApiResponse):
        self.responses.append(response.to_dict())

    def ids(self, outcome: Outcome) -> List[Any]:
        return list(self.outcomes[Outcome(outcome)])

    def counts(self) -> Dict[str, int]:
        counts = {outcome.value: len(ids) for outcome, ids in self.outcomes.items()}
        counts[RESPONSES_KEY] = len(self.responses)
        return counts

    def to_dict(self) -> Dict[str, List[Any]]:
        data = {outcome.value: list(ids) for outcome, ids in self.outcomes.items()}
        data[RESPONSES_KEY] = list(self.responses)
        return data

    def summary(self) -> str:
        """One line, category: count pairs in report order"""
        return ', '.join(f"{name}: {count}" for name, count in self.counts().items())

    def write_report(self, report_dir: str, finished_at: Optional[datetime] = None) -> str:
        """
        Write the tally to a fresh timestamped JSON file and return its path.

        Runs finishing in the same second get a -1, -2, ... suffix; an
        existing report is never overwritten.
        """
        finished_at = finished_at or datetime.now()
        os.makedirs(report_dir, exist_ok=True)
        attempt = 0
        while True:
            path = os.path.join(report_dir, report_filename(finished_at, attempt))
            try:
                with open(path, 'x', encoding='utf-8') as f:
                    json.dump(self.to_dict(), f)
                break
            except FileExistsError:
                attempt += 1
        logger.info(f"💾 Report written to {path}")
        return path


def report_filename(finished_at: datetime, attempt: int = 0) -> str:
    suffix = f"-{attempt}" if attempt else ''
    return f"{REPORT_PREFIX}_{finished_at.strftime('%Y-%m-%d_%H%M%S')}{suffix}.json"
