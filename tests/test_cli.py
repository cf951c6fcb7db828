import json
from click.testing import CliRunner
from social_sense.cli import main

COMMENTS_CSV = """author,text,likes
ann,Where can I buy this lens?,10
ben,check out my channel,1
cy,The colours look amazing,4
cy,The colours look amazing,4
dee,🔥🔥🔥,0
"""

ACCOUNT = {
    "platform": "youtube",
    "profileMetrics": {"followers": 100, "following": 900},
    "contentMetrics": [{"likes": 40, "comments": 2, "views": 1000}],
}


def test_analyze_comments(tmp_path):
    path = tmp_path / "comments.csv"
    path.write_text(COMMENTS_CSV, encoding="utf-8")
    output = tmp_path / "sample.csv"

    result = CliRunner().invoke(main, [
        "analyze-comments", "-f", str(path), "--no-progress", "--seed", "1", "-o", str(output),
    ])
    assert result.exit_code == 0, result.output
    assert "after hard filters:   2" in result.output
    assert output.exists()


def test_validate_engagement_json(tmp_path):
    path = tmp_path / "account.json"
    path.write_text(json.dumps(ACCOUNT), encoding="utf-8")

    result = CliRunner().invoke(main, ["validate-engagement", "-f", str(path), "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["breakdown"]["ratioAnalysis"]["score"] <= 17
    assert any(f["flag"] == "High following-to-followers ratio" for f in data["redFlags"])


def test_validate_engagement_report(tmp_path):
    path = tmp_path / "account.json"
    path.write_text(json.dumps(ACCOUNT), encoding="utf-8")

    result = CliRunner().invoke(main, ["validate-engagement", "-f", str(path)])
    assert result.exit_code == 0, result.output
    assert "Authenticity score:" in result.output
    assert "Recommendations:" in result.output


def test_missing_file_exits_with_error(tmp_path):
    result = CliRunner().invoke(main, ["analyze-comments", "-f", str(tmp_path / "missing.csv"), "--no-progress"])
    assert result.exit_code == 1
