"""
Web Interface for Tailwind Shorthand Analysis
"""

import logging
import os
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, jsonify, request

from core.class_extractor import MARKUP_FILETYPES, SCRIPT_FILETYPES
from core.errors import ShorthandError
from core.lint_config import load_config, resolve_tailwind_options
from core.shorthand_analyzer import ShorthandAnalyzer
from core.shorthand_rule import ShorthandRule

logger = logging.getLogger(__name__)

app = Flask(__name__)
config = resolve_tailwind_options(load_config(os.environ.get('SHORTHAND_CONFIG')))
analyzer = ShorthandAnalyzer(config)
rule = ShorthandRule(config)

FILETYPES = MARKUP_FILETYPES + SCRIPT_FILETYPES

def _json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None
    return payload

@app.route('/')
def index():
    """Service description."""
    return jsonify({
        'service': 'tailwind-shorthand',
        'endpoints': ['/api/analyze', '/api/lint'],
        'filetypes': list(FILETYPES),
    })

@app.route('/api/analyze', methods=['POST'])
def analyze():
    """Analyze a single class string: {"classes": "mt-0 mb-0"}."""
    payload = _json_body()
    if payload is None or not isinstance(payload.get('classes'), str):
        return jsonify({'error': "JSON body with a 'classes' string is required"}), 400
    try:
        result = analyzer.analyze(payload['classes'])
        return jsonify(result.to_dict())
    except ShorthandError as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        return jsonify({'error': str(e)}), 500

@app.route('/api/lint', methods=['POST'])
def lint():
    """Lint source text: {"content": "...", "filetype": "html"}."""
    payload = _json_body()
    if payload is None or not isinstance(payload.get('content'), str):
        return jsonify({'error': "JSON body with a 'content' string is required"}), 400
    filetype = payload.get('filetype', 'html')
    if filetype not in FILETYPES:
        return jsonify({'error': f"Unsupported filetype '{filetype}'"}), 400
    try:
        report = rule.check(payload['content'], filetype, path=payload.get('path'))
    except Exception as e:
        logger.error(f"Lint failed: {e}", exc_info=True)
        return jsonify({'error': str(e)}), 500
    result = report.to_dict()
    result['fixedSource'] = report.fixed_source
    return jsonify(result)

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get("PORT", 5000))
    app.run(host='0.0.0.0', port=port)
