import json
import logging
import random
from colorama import Fore, Style
from social_sense.adapters.files.loader import load_authenticity_inputs, load_comments
from social_sense.config import log_level
from social_sense.domain.models import AuthenticityResult, ProcessedBatch
from social_sense.services.authenticity.scorer import score_authenticity
from social_sense.services.exporter import export_comments
from social_sense.services.pipeline import process_batch

LEVEL_STYLES = {
    logging.DEBUG: (Fore.WHITE, "[DEBUG] "),
    logging.INFO: (Fore.CYAN, "[INFO] "),
    logging.WARNING: (Fore.YELLOW, "[WARN] "),
    logging.ERROR: (Fore.RED, "[ERROR] "),
    logging.CRITICAL: (Fore.RED, "[ERROR] "),
}

SEVERITY_COLORS = {"high": Fore.RED, "medium": Fore.YELLOW, "low": Fore.WHITE}
VERDICT_COLORS = {"success": Fore.GREEN, "warning": Fore.YELLOW, "error": Fore.RED}


class ColorFormatter(logging.Formatter):
    def format(self, record):
        color, prefix = LEVEL_STYLES.get(record.levelno, (Fore.WHITE, ""))
        return color + prefix + Style.BRIGHT + super().format(record)


def configure_logging(verbose: bool = False):
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(message)s"))
    root = logging.getLogger("social_sense")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else log_level())
    root.propagate = False


def print_startup_info(command, path):
    print(Fore.MAGENTA + f"Starting SocialSense {command} for: {path}")


def print_batch_summary(batch: ProcessedBatch):
    stats = batch.stats
    print(Fore.GREEN + f"\nFiltered {Fore.YELLOW}{stats.original}{Fore.GREEN} comments:")
    print(f"  emoji-only removed:   {stats.emoji_only}")
    print(f"  spam/promo removed:   {stats.spam_promo}")
    print(f"  duplicates removed:   {stats.duplicates}")
    print(f"  generic praise (kept): {stats.generic_praise}")
    print(f"  off-topic (kept):      {stats.off_topic}")
    print(Fore.GREEN + f"  after hard filters:   {stats.after_hard_filters}")

    s = batch.sentiment
    print(Fore.GREEN + "\nSentiment:")
    print(f"  {Fore.GREEN}positive {s.positive_pct}%  {Fore.RED}negative {s.negative_pct}%  "
          f"{Fore.WHITE}neutral {s.neutral_pct}%  (avg {s.average_score})")

    if batch.keywords:
        print(Fore.GREEN + "\nTop keywords: " + Fore.YELLOW + ", ".join(f"{k.word} ({k.count})" for k in batch.keywords[:10]))
    if batch.themes:
        print(Fore.GREEN + "Top themes:   " + Fore.YELLOW + ", ".join(f"{t.theme} ({t.count})" for t in batch.themes[:5]))
    print(Fore.MAGENTA + f"\nSampled {len(batch.sampled)} comments for analysis")


def print_authenticity_result(result: AuthenticityResult):
    color = VERDICT_COLORS.get(result.verdict_color, Fore.WHITE)
    print(color + Style.BRIGHT + f"\nAuthenticity score: {result.score}/100 - {result.verdict}")
    for name, part in result.breakdown.items():
        print(f"  {name:<15} {part.score:>2}/{part.max:<2} {part.reason}")

    if result.red_flags:
        print(Fore.RED + f"\nRed flags ({len(result.red_flags)}):")
        for flag in result.red_flags:
            print(SEVERITY_COLORS.get(flag.severity, Fore.WHITE) + f"  [{flag.severity.upper()}] {flag.flag}: {flag.details}")
    if result.positive_signals:
        print(Fore.GREEN + "\nPositive signals:")
        for signal in result.positive_signals:
            print(Fore.GREEN + f"  + {signal.signal}: {signal.details}")

    print(Fore.MAGENTA + "\nRecommendations:")
    for rec in result.recommendations:
        print(f"  - {rec}")


def analyze_comments_file(path, target_size=None, top_n=None, output=None, seed=None, progress=True):
    print_startup_info("comment analysis", path)
    comments = load_comments(path, progress=progress)
    rng = random.Random(seed) if seed is not None else None
    batch = process_batch(comments, target_size=target_size, top_n=top_n, rng=rng)
    print_batch_summary(batch)

    if output:
        filename = export_comments(batch.sampled, output)
        print(Fore.GREEN + "[OK] " + Style.BRIGHT + f"Saved {len(batch.sampled)} sampled comments to {filename}")
    return batch


def validate_engagement_file(path, as_json=False):
    inputs = load_authenticity_inputs(path)
    result = score_authenticity(inputs)
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print_startup_info("engagement validation", path)
        print_authenticity_result(result)
    return result
