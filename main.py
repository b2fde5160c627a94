#!/usr/bin/env python3
"""
Submission Analytics

Command-line entry point for analyzing a user's assignment submission
history. It loads an assignment export, computes the analytics snapshot
and saves it (JSON plus CSV tables) to the output directory.
"""

import sys
import logging
import argparse
from pathlib import Path
from datetime import datetime
from typing import List, Optional

from submission_analytics.config.settings import Settings
from submission_analytics.analyzers import AnalyzerManager, AnalyticsEngine
from submission_analytics.data.data_repository import DataRepository
from submission_analytics.data.models import AnalyticsSnapshot
from submission_analytics.utils.safe_ops import safe_parse_datetime
from submission_analytics.utils.size_utils import format_bytes, format_percent


class AnalysisApp:
    """
    Main application class for the submission analytics system.

    This class coordinates the application workflow:
    - Parsing command line arguments
    - Setting up logging
    - Loading configuration and data
    - Running the analysis and saving the snapshot
    """

    def __init__(self):
        """Initialize the application."""
        self.args = None
        self.settings = None
        self.logger = None
        self.data_repository = None
        self.analyzer_manager = None

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the application.

        Args:
            argv: Command line arguments (sys.argv[1:] if None)

        Returns:
            int: Exit code (0 for success, non-zero for errors)
        """
        try:
            self._parse_arguments(argv)
            self._setup_logging()
            self._load_configuration()

            if not self._initialize_components():
                return 1

            return self._execute_analysis()

        except Exception as e:
            if self.logger:
                self.logger.exception(f"Unhandled exception: {e}")
            else:
                print(f"ERROR: {e}")
            return 1

    def _parse_arguments(self, argv: Optional[List[str]] = None):
        """Parse command line arguments."""
        parser = argparse.ArgumentParser(
            description="Submission behavior analytics",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )

        # Configuration options
        config_group = parser.add_argument_group("Configuration Options")
        config_group.add_argument(
            "--config", type=str, help="Path to configuration file (JSON or YAML)"
        )
        config_group.add_argument(
            "--input", type=str, help="Assignment export (JSON or CSV)"
        )
        config_group.add_argument("--log-dir", type=str, help="Directory for log files")
        config_group.add_argument(
            "--output-dir", type=str, help="Output directory for results"
        )
        config_group.add_argument(
            "--timezone", type=str, help="IANA timezone for reading timestamps"
        )

        # Analysis parameters
        params_group = parser.add_argument_group("Analysis Parameters")
        semester_group = params_group.add_mutually_exclusive_group()
        semester_group.add_argument(
            "--semester", help="Named semester from SEMESTER_RANGES"
        )
        semester_group.add_argument(
            "--semester-start", metavar="DATE", help="Semester start date"
        )
        params_group.add_argument(
            "--semester-end", metavar="DATE", help="Semester end date"
        )
        params_group.add_argument(
            "--now",
            metavar="TIMESTAMP",
            help="Reference time for pending-deadline risk (default: current time)",
        )

        # System options
        sys_group = parser.add_argument_group("System Options")
        sys_group.add_argument(
            "--no-save", action="store_true", help="Only log the summary"
        )
        sys_group.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose logging"
        )
        sys_group.add_argument(
            "--no-cache",
            action="store_true",
            help="Disable caching of analysis results",
        )

        self.args = parser.parse_args(argv)

    def _setup_logging(self):
        """Configure logging for the application."""
        log_level = logging.DEBUG if self.args.verbose else logging.INFO

        log_path = Path(self.args.log_dir or "./logs")
        log_path.mkdir(parents=True, exist_ok=True)

        # Create log filename with timestamp
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"submission_analytics_{timestamp}.log"

        # Configure file handler
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)

        # Configure console handler with a simpler format
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_formatter = logging.Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(console_formatter)

        # Configure root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info("Logging initialized")

    def _load_configuration(self):
        """Load configuration settings."""
        self.logger.info("Loading configuration settings")

        self.settings = Settings(config_path=self.args.config)

        # Override settings from command line arguments if provided
        if self.args.input:
            self.settings.ASSIGNMENT_DATA_PATH = Path(self.args.input)
        if self.args.output_dir:
            self.settings.OUTPUT_DIR = Path(self.args.output_dir)
        if self.args.timezone:
            self.settings.DISPLAY_TIMEZONE = self.args.timezone
        if self.args.no_cache:
            self.settings.CACHE_ENABLED = False

        self.logger.info("Configuration loaded successfully")

    def _initialize_components(self) -> bool:
        """
        Load data and create the analyzer manager.

        Returns:
            bool: True if initialization was successful, False otherwise
        """
        data_path = Path(self.settings.ASSIGNMENT_DATA_PATH)
        if not data_path.exists():
            self.logger.error(f"Assignment data not found: {data_path}")
            return False

        try:
            self.data_repository = DataRepository(self.settings)
            self.data_repository.load_data_from_file(str(data_path))

            if self.args.semester:
                if self.data_repository.select_named_semester(self.args.semester) is None:
                    return False
            elif self.args.semester_start or self.args.semester_end:
                self.data_repository.set_semester(
                    self.args.semester_start, self.args.semester_end
                )

            self.analyzer_manager = AnalyzerManager(
                self.data_repository,
                cache_enabled=self.settings.CACHE_ENABLED,
                cache_max_size=self.settings.CACHE_MAX_SIZE,
                engine=AnalyticsEngine(timezone=self.settings.get_timezone()),
            )

            self.logger.info("All components initialized successfully")
            return True

        except Exception as e:
            self.logger.exception(f"Error initializing components: {e}")
            return False

    def _resolve_now(self) -> Optional[datetime]:
        """Parse --now, if given."""
        if not self.args.now:
            return None
        now = safe_parse_datetime(self.args.now, self.settings.get_timezone())
        if now is None:
            raise ValueError(f"Unrecognized --now timestamp: {self.args.now}")
        return now

    def _execute_analysis(self) -> int:
        """
        Run the analysis, log its summary and save the results.

        Returns:
            int: Exit code (0 for success, non-zero for errors)
        """
        output_dir = None if self.args.no_save else str(self.settings.OUTPUT_DIR)
        result = self.analyzer_manager.run_analysis(
            output_dir=output_dir, now=self._resolve_now()
        )

        self._log_summary(result["snapshot"])
        for name, path in result.get("output_files", {}).items():
            self.logger.debug(f"{name}: {path}")

        return 0

    def _log_summary(self, snapshot: AnalyticsSnapshot) -> None:
        """Log the headline metrics of a snapshot."""
        profile = snapshot.procrastination_profile
        activity = snapshot.activity_stats

        self.logger.info(
            f"Submitted {snapshot.submitted_count}/{snapshot.total_count} "
            f"({format_percent(snapshot.submission_rate)})"
        )
        self.logger.info(
            f"Late {format_percent(snapshot.late_rate)}, "
            f"night {format_percent(snapshot.night_rate)}, "
            f"weekend {format_percent(snapshot.weekend_rate)}, "
            f"last 24h {format_percent(snapshot.last24_rate)}, "
            f"last 6h {format_percent(snapshot.last6_rate)}"
        )
        if snapshot.time_stats:
            self.logger.info(
                f"Lead time: avg {snapshot.time_stats.avg:.1f}h, "
                f"median {snapshot.time_stats.median:.1f}h"
            )
        self.logger.info(
            f"Active days {activity.active_days}, longest streak {activity.longest_streak}"
        )
        self.logger.info(
            f"Pending with deadline ahead: {snapshot.pending_risk.total} "
            f"(risk {format_percent(snapshot.pending_risk.risk_score)})"
        )
        self.logger.info(
            f"Attachments: {snapshot.attachment_stats.total}, "
            f"{format_bytes(snapshot.attachment_stats.total_size)} total"
        )
        self.logger.info(
            f"Procrastination profile: {profile.label.value} ({profile.score}) - "
            f"{profile.description}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the analysis application."""
    app = AnalysisApp()
    return app.run(argv)


if __name__ == "__main__":
    sys.exit(main())
