"""
Conversion statistics tracking module.

This module provides a dedicated class for tracking conversion statistics,
separating this concern from the orchestration logic.
"""

from typing import Dict, Any
from dataclasses import dataclass, field


@dataclass
class ConversionStats:
    """
    Tracks statistics for finished conversion jobs.

    Counts are kept overall and per conversion id, so a session summary can
    show which conversions were used and how often they failed.
    """
    total_jobs: int = 0
    succeeded: int = 0
    failed: int = 0
    total_processing_time: float = 0.0
    total_output_bytes: int = 0
    conversion_counts: Dict[str, int] = field(default_factory=dict)
    error_counts: Dict[str, int] = field(default_factory=dict)

    def add_result(self, conversion_id: str, success: bool, processing_time: float = 0.0,
                   output_bytes: int = 0, error_kind: str = ''):
        """
        Add a finished job to the statistics.

        Args:
            conversion_id: Descriptor id of the job
            success: Whether the job succeeded
            processing_time: Time taken by the job
            output_bytes: Size of the artifact, 0 on failure
            error_kind: Error classification of a failed job
        """
        self.total_jobs += 1
        self.total_processing_time += processing_time
        self.total_output_bytes += output_bytes

        if success:
            self.succeeded += 1
        else:
            self.failed += 1
            if error_kind:
                self.error_counts[error_kind] = self.error_counts.get(error_kind, 0) + 1

        self.conversion_counts[conversion_id] = self.conversion_counts.get(conversion_id, 0) + 1

    def get_summary(self) -> Dict[str, Any]:
        """
        Get a summary of conversion statistics.

        Returns:
            Dictionary with calculated statistics and percentages
        """
        if self.total_jobs == 0:
            return {
                'total_jobs': 0,
                'succeeded': 0,
                'failed': 0,
                'success_rate': 0.0,
                'average_time_per_job': 0.0,
                'total_processing_time': 0.0,
                'total_output_bytes': 0,
                'conversion_counts': {},
                'error_counts': {}
            }

        return {
            'total_jobs': self.total_jobs,
            'succeeded': self.succeeded,
            'failed': self.failed,
            'success_rate': (self.succeeded / self.total_jobs) * 100,
            'average_time_per_job': self.total_processing_time / self.total_jobs,
            'total_processing_time': self.total_processing_time,
            'total_output_bytes': self.total_output_bytes,
            'conversion_counts': self.conversion_counts.copy(),
            'error_counts': self.error_counts.copy()
        }

    def reset(self):
        """Reset all statistics to zero."""
        self.total_jobs = 0
        self.succeeded = 0
        self.failed = 0
        self.total_processing_time = 0.0
        self.total_output_bytes = 0
        self.conversion_counts.clear()
        self.error_counts.clear()
