# src/social_sense/adapters/files/loader.py

import json
import os
from typing import Any, Dict, List, Optional

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from social_sense.domain.benchmarks import PLATFORMS
from social_sense.domain.models import (
    AuthenticityInputs,
    CommentSample,
    ContentMetric,
    FollowerSnapshot,
    ProfileMetrics,
    RawComment,
)

TEXT_COLUMNS = ("text", "body", "comment", "Body", "Text", "Comment")
AUTHOR_COLUMNS = ("author", "user", "username", "Author", "User")
LIKE_COLUMNS = ("likeCount", "like_count", "likes", "score", "Likes", "Score")
DATE_COLUMNS = ("publishedAt", "published_at", "date", "date_utc", "DateUTC", "Date")


class InputFormatError(ValueError):
    """Raised when an input file cannot be mapped onto the engine's records."""


def _pick_column(df: pd.DataFrame, candidates) -> Optional[str]:
    for name in candidates:
        if name in df.columns:
            return name
    return None


def _clean_value(value) -> Any:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _as_int(value) -> int:
    value = _clean_value(value)
    try:
        return max(0, int(float(value))) if value is not None else 0
    except (TypeError, ValueError):
        return 0


def _as_datetime(value):
    value = _clean_value(value)
    if value is None:
        return None
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    return None if pd.isna(ts) else ts.to_pydatetime()


def read_table(path: str) -> pd.DataFrame:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        return pd.read_csv(path, keep_default_na=False, na_values=[""])
    if ext in (".xlsx", ".xls"):
        return pd.read_excel(path, keep_default_na=False, na_values=[""])
    if ext == ".json":
        return pd.read_json(path)
    raise InputFormatError(f"Unsupported file type '{ext}' (expected .csv, .xlsx or .json)")


def comments_from_dataframe(df: pd.DataFrame, progress: bool = True) -> List[RawComment]:
    text_col = _pick_column(df, TEXT_COLUMNS)
    if text_col is None:
        raise InputFormatError(f"No comment text column found; expected one of {', '.join(TEXT_COLUMNS[:3])}")
    author_col = _pick_column(df, AUTHOR_COLUMNS)
    like_col = _pick_column(df, LIKE_COLUMNS)
    date_col = _pick_column(df, DATE_COLUMNS)

    comments: List[RawComment] = []
    rows = tqdm(df.to_dict("records"),
                desc=f"{Fore.YELLOW}Loading comments{Style.RESET_ALL}",
                unit="comment",
                ncols=80,
                colour="cyan",
                disable=not progress)
    for row in rows:
        text = _clean_value(row.get(text_col))
        author = _clean_value(row.get(author_col)) if author_col else None
        comments.append(RawComment(
            author=str(author) if author is not None else "",
            text=str(text) if text is not None else "",
            like_count=_as_int(row.get(like_col)) if like_col else 0,
            published_at=_as_datetime(row.get(date_col)) if date_col else None,
        ))
    return comments


def load_comments(path: str, progress: bool = True) -> List[RawComment]:
    """Load a CSV / Excel / JSON comment export into RawComment records."""
    return comments_from_dataframe(read_table(path), progress=progress)


# ----------------------------
# Authenticity inputs
# ----------------------------
def authenticity_inputs_from_dict(data: Dict[str, Any]) -> AuthenticityInputs:
    if not isinstance(data, dict):
        raise InputFormatError("Authenticity input must be a JSON object")

    platform = str(data.get("platform") or "").lower()
    if platform not in PLATFORMS:
        raise InputFormatError(f"Invalid platform '{platform}'. Must be one of: {', '.join(PLATFORMS)}")

    profile = data.get("profileMetrics") or {}
    content = data.get("contentMetrics") or []
    samples = data.get("commentSamples") or []
    history = (data.get("historicalData") or {}).get("followerHistory")

    return AuthenticityInputs(
        platform=platform,
        profile_metrics=ProfileMetrics(
            followers=_as_int(profile.get("followers")),
            following=_as_int(profile.get("following")),
        ),
        content_metrics=tuple(
            ContentMetric(
                likes=_as_int(m.get("likes")),
                comments=_as_int(m.get("comments")),
                shares=_as_int(m.get("shares")),
                views=_as_int(m.get("views")),
            ) for m in content
        ),
        comment_samples=tuple(
            CommentSample(text=str(s.get("text") or ""), user=str(s.get("user") or ""))
            for s in samples
        ),
        follower_history=tuple(
            FollowerSnapshot(date=h.get("date"), count=h.get("count")) for h in history
        ) if history else None,
    )


def load_authenticity_inputs(path: str) -> AuthenticityInputs:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InputFormatError(f"Invalid JSON in {path}: {e}") from e
    return authenticity_inputs_from_dict(data)
