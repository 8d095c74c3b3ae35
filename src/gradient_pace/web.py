"""HTTP endpoint serving the analysis to the chart front end."""

import logging

from flask import Flask, jsonify, request

from gradient_pace import __version_date__, get_git_hash
from gradient_pace.analyzer import analyze
from gradient_pace.config import default_filter_settings, get_defaults
from gradient_pace.loader import collect_bins, load_results, parse_filter_settings
from gradient_pace.models import STAT_TYPES
from gradient_pace.summary import summarize_results, summary_to_dict

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _error(message: str, status: int = 400):
    return jsonify({"success": False, "error": message}), status


@app.route("/health")
def health():
    return {
        "status": "ok",
        "version_date": __version_date__,
        "git_hash": get_git_hash(),
    }


@app.route("/api/advanced-analysis", methods=["POST"])
def advanced_analysis():
    """Analyse the posted results with optional filter settings.

    Body: {results, heartRateFilter?, removeUnreliableBins?, filterOptions?, statType?}
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return _error("Request body must be a JSON object")

    stat_type = body.get("statType", get_defaults()["stat_type"])
    if stat_type not in STAT_TYPES:
        return _error(f"Invalid statType: {stat_type!r}")

    try:
        results = load_results(body)
        settings = parse_filter_settings(body, default_filter_settings())
    except ValueError as e:
        logger.info("Rejected analysis request: %s", e)
        return _error(str(e))

    result = analyze(collect_bins(results), settings, stat_type)
    return jsonify({
        "success": True,
        "analyses": result.to_dict(),
        "summary": summary_to_dict(summarize_results(results)),
    })


def main():
    """Run the web server."""
    import os
    port = int(os.environ.get("PORT", 5050))
    print("Starting Gradient Pace web server...")
    print(f"API available at http://localhost:{port}/api/advanced-analysis")
    app.run(host="0.0.0.0", port=port, debug=True)


if __name__ == "__main__":
    main()
