from typing import List, Optional, Sequence
import pandas as pd
from social_sense.domain.models import ProcessedComment
from social_sense.services.comment_filter import sanitize_csv_text
from datetime import datetime
import os


def comments_to_dataframe(comments: Sequence[ProcessedComment]) -> pd.DataFrame:
    data = [
        {
            "Author": sanitize_csv_text(c.author),
            "Text": sanitize_csv_text(c.text),
            "CleanText": sanitize_csv_text(c.clean_text),
            "Likes": c.like_count,
            "PublishedAt": c.published_at.strftime("%Y-%m-%d %H:%M:%S") if c.published_at else "",
            "Sentiment": c.sentiment.label,
            "SentimentScore": c.sentiment.value,
            "GenericPraise": c.is_generic_praise,
            "OffTopic": c.is_off_topic,
        } for c in comments
    ]
    return pd.DataFrame(data, columns=[
        "Author", "Text", "CleanText", "Likes", "PublishedAt",
        "Sentiment", "SentimentScore", "GenericPraise", "OffTopic",
    ])


def export_comments(comments: List[ProcessedComment], filename: Optional[str] = None) -> str:
    """
    Export processed comments to Excel (.xlsx) or CSV, picked by extension.

    Args:
        comments (List[ProcessedComment]): Filtered comments to export
        filename (Optional[str]): Output filename. If None, generates a timestamped .xlsx name.

    Returns:
        str: The filename written
    """
    if not filename:
        filename = f"processed_comments_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"

    df = comments_to_dataframe(comments)
    if os.path.splitext(filename)[1].lower() == ".csv":
        df.to_csv(filename, index=False)
    else:
        df.to_excel(filename, index=False)
    return filename
