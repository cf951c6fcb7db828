import click
import logging
from colorama import init
from social_sense.adapters.files.loader import InputFormatError
from social_sense.services.cli_services import (
    analyze_comments_file,
    configure_logging,
    validate_engagement_file,
)

init(autoreset=True)
logger = logging.getLogger("social_sense.cli")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose):
    """SocialSense CLI - Filter, sample and score social-media comments"""
    configure_logging(verbose)


# ----------------------------
# Comment analysis command
# ----------------------------
@main.command("analyze-comments")
@click.option("--file", "-f", "path", type=str, required=True, help="CSV, Excel or JSON comment export")
@click.option("--target-size", "-t", type=int, default=None, help="Sample size for large batches")
@click.option("--top", "-n", "top_n", type=int, default=None, help="Number of keywords to report")
@click.option("--output", "-o", type=str, default=None, help="Write sampled comments to .xlsx or .csv")
@click.option("--seed", type=int, default=None, help="Seed for the random sample tail")
@click.option("--no-progress", is_flag=True, help="Hide the loading progress bar")
def analyze_comments(path, target_size, top_n, output, seed, no_progress):
    """Filter, score and sample a comment export."""
    try:
        analyze_comments_file(path, target_size=target_size, top_n=top_n, output=output,
                              seed=seed, progress=not no_progress)
    except (FileNotFoundError, InputFormatError) as e:
        logger.error(str(e))
        raise SystemExit(1)


# ----------------------------
# Engagement validation command
# ----------------------------
@main.command("validate-engagement")
@click.option("--file", "-f", "path", type=str, required=True, help="JSON file with account metrics")
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON")
def validate_engagement(path, as_json):
    """Score how authentic an account's engagement looks."""
    try:
        validate_engagement_file(path, as_json=as_json)
    except (FileNotFoundError, InputFormatError) as e:
        logger.error(str(e))
        raise SystemExit(1)


if __name__ == "__main__":
    main()
