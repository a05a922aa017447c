"""Command-line entry point for the job recruitment database."""

import argparse
import logging
import sys
import csv
from pathlib import Path
from typing import List, Dict, Any, Callable

# Configure logging with datetime prefix
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

from recruitment import (
    init_database,
    seed_sample_data,
    add_application,
    get_all_employers,
    get_all_jobs,
    get_all_candidates,
    get_applications,
    get_job_listings,
    get_jobs_by_category,
    get_top_paid_jobs_per_employer,
    get_salary_display,
    get_salary_range,
    get_salary_rankings,
    get_salary_tiers,
    count_jobs_by_category,
    ApplicationStatus,
    RecruitmentError,
)
from config.settings import VERBOSE, LOG_LEVEL, EXPORT_DIR


REPORTS: Dict[str, Callable[[], List[Dict[str, Any]]]] = {
    'top-paid': get_top_paid_jobs_per_employer,
    'salary-display': get_salary_display,
    'salary-range': lambda: [get_salary_range()],
    'rankings': get_salary_rankings,
    'tiers': get_salary_tiers,
    'rollup': count_jobs_by_category,
}


def setup_logging(verbose: bool = False):
    """Configure logging level."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.getLogger().setLevel(level)
    if verbose:
        logger.info("Verbose logging enabled")


def log_rows(heading: str, rows: List[Dict[str, Any]]):
    """Log query results one row per line."""
    logger.info(f"{heading} ({len(rows)} rows)")
    for row in rows:
        logger.info("  " + ", ".join(f"{key}={value}" for key, value in row.items()))


def run_report(name: str) -> List[Dict[str, Any]]:
    """Run a named analytical report."""
    rows = REPORTS[name]()
    log_rows(f"Report '{name}'", rows)
    return rows


def export_to_csv(rows: List[Dict[str, Any]], output_path: str) -> bool:
    """Export report rows to CSV."""
    if not rows:
        logger.warning("No rows to export")
        return False

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(output_file, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        logger.info(f"Exported {len(rows)} rows to {output_path}")
        return True
    except OSError as e:
        logger.error(f"Error exporting to CSV: {e}", exc_info=True)
        return False


def apply_for_job(candidate_id: int, job_id: int) -> bool:
    """Submit a Pending application, logging a rejection instead of raising."""
    try:
        application_id = add_application(job_id, candidate_id)
        logger.info(f"Application {application_id} submitted")
        return True
    except RecruitmentError as e:
        logger.error(f"Application rejected: {e}")
        return False


def print_summary():
    """Print summary statistics."""
    employers = get_all_employers()
    jobs = get_all_jobs()
    candidates = get_all_candidates()
    applications = get_applications()

    by_status = {status.value: 0 for status in ApplicationStatus}
    for application in applications:
        by_status[application['status']] = by_status.get(application['status'], 0) + 1

    logger.info("=" * 50)
    logger.info("Database Summary")
    logger.info("=" * 50)
    logger.info(f"Employers: {len(employers)}")
    logger.info(f"Jobs: {len(jobs)}")
    logger.info(f"Candidates: {len(candidates)}")
    logger.info(f"Applications: {len(applications)}")
    for status, count in by_status.items():
        logger.info(f"  {status}: {count}")
    logger.info("=" * 50)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Job recruitment database - manage employers, jobs, candidates and applications"
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert the sample data set into an empty database'
    )
    parser.add_argument(
        '--listings',
        action='store_true',
        help='Show the job listings view (title, salary, company)'
    )
    parser.add_argument(
        '--category',
        type=str,
        default=None,
        help='Show all jobs in a category (IT, Finance, Healthcare, Education, Others)'
    )
    parser.add_argument(
        '--report',
        choices=sorted(REPORTS),
        default=None,
        help='Run an analytical report'
    )
    parser.add_argument(
        '--export',
        action='store_true',
        help='Export the report (default: rankings) to CSV'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help=f'Output CSV file path (default: {EXPORT_DIR}/<report>.csv)'
    )
    parser.add_argument(
        '--apply',
        nargs=2,
        type=int,
        metavar=('CANDIDATE_ID', 'JOB_ID'),
        default=None,
        help='Submit a Pending application for a candidate'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable detailed logging'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose or VERBOSE)

    try:
        init_database()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        sys.exit(1)

    if args.seed:
        seed_sample_data()

    if args.apply:
        candidate_id, job_id = args.apply
        apply_for_job(candidate_id, job_id)

    if args.listings:
        log_rows("Job listings", get_job_listings())

    if args.category:
        log_rows(f"Jobs in category '{args.category}'", get_jobs_by_category(args.category))

    report_name = args.report or ('rankings' if args.export else None)
    if report_name:
        rows = run_report(report_name)
        if args.export:
            output = args.output or str(Path(EXPORT_DIR) / f"{report_name}.csv")
            export_to_csv(rows, output)

    print_summary()
    logger.info("Tool execution complete")


if __name__ == "__main__":
    main()
