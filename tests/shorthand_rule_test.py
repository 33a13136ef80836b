import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.errors import ShorthandInvariantError
from core.shorthand_rule import Fix, ShorthandRule, apply_fixes, format_message

MARGIN_HTML = '''
      <div class="mt-0 mr-0 mb-0 ml-1 md:mx-2 md:my-2 py-0 px-0 block">
        Possible shorthand for margin
      </div>
      '''

def test_format_message():
    assert format_message(['mt-0', 'mb-0'], 'my-0') == \
        "Classnames 'mt-0, mb-0' could be replaced by the 'my-0' shorthand!"

def test_check_html_reports_each_group():
    rule = ShorthandRule()
    report = rule.check(MARGIN_HTML, 'html')
    assert [d.classnames for d in report.diagnostics] == [
        ['mt-0', 'mb-0'], ['md:mx-2', 'md:my-2'], ['py-0', 'px-0']]
    assert [d.shorthand for d in report.diagnostics] == ['my-0', 'md:m-2', 'p-0']
    assert all(d.line == 2 for d in report.diagnostics)
    assert all(d.rule_id == 'enforces-shorthand' for d in report.diagnostics)
    assert report.fixed_source == MARGIN_HTML.replace(
        'mt-0 mr-0 mb-0 ml-1 md:mx-2 md:my-2 py-0 px-0 block', 'my-0 mr-0 ml-1 md:m-2 p-0 block')
    assert report.fixable

def test_check_jsx_fixes_every_occurrence():
    jsx = '<div className="gap-x-4 gap-y-4"><img className={clsx("scale-x-75 scale-y-75", on && "block")} /></div>'
    report = ShorthandRule().check(jsx, 'jsx')
    assert len(report.diagnostics) == 2
    assert report.fixed_source == '<div className="gap-4"><img className={clsx("scale-75", on && "block")} /></div>'

def test_check_keeps_surrounding_whitespace():
    html = '<div class="  rounded-tl rounded-tr rounded-b\n ">x</div>'
    report = ShorthandRule().check(html, 'html')
    assert report.fixed_source == '<div class="  rounded\n ">x</div>'

def test_check_without_shorthand():
    html = '<div class="overflow-x-auto overflow-y-scroll">x</div>'
    report = ShorthandRule().check(html, 'html', path='page.html')
    assert report.diagnostics == []
    assert report.errors == []
    assert report.fixed_source == html
    assert not report.fixable
    assert report.to_dict() == {'path': 'page.html', 'diagnostics': [], 'errors': [], 'fixable': False}

def test_invariant_error_recorded_and_not_fixed(monkeypatch):
    rule = ShorthandRule()

    def broken(class_string, report=None):
        raise ShorthandInvariantError('claimed twice', token_positions=[0])

    monkeypatch.setattr(rule.analyzer, 'analyze', broken)
    html = '<div class="mt-0 mb-0">x</div><p class="px-1 py-1">y</p>'
    report = rule.check(html, 'html')
    assert report.diagnostics == []
    assert len(report.errors) == 2
    assert report.errors[0]['classes'] == 'mt-0 mb-0'
    assert report.errors[0]['error'] == 'claimed twice'
    assert report.fixed_source == html

def test_diagnostic_to_dict():
    report = ShorthandRule().check('<i class="mt-1 mb-1"></i>', 'html')
    data = report.diagnostics[0].to_dict()
    assert data['ruleId'] == 'enforces-shorthand'
    assert data['line'] == 1
    assert data['column'] == 11
    assert data['fix'] == {'start': 10, 'end': 19, 'text': 'my-1'}

def test_apply_fixes_skips_overlaps():
    fixes = [Fix(2, 6, 'Y'), Fix(0, 4, 'X'), Fix(6, 8, 'Z')]
    assert apply_fixes('abcdefgh', fixes) == 'XefZ'

def test_check_file(tmp_path):
    page = tmp_path / 'page.html'
    page.write_text('<div class="px-2 py-2"></div>', encoding='utf-8')
    report = ShorthandRule().check_file(page)
    assert report.path == str(page)
    assert report.fixed_source == '<div class="p-2"></div>'

def test_check_file_unsupported_extension(tmp_path):
    sheet = tmp_path / 'styles.css'
    sheet.write_text('.a { margin: 0 }', encoding='utf-8')
    with pytest.raises(ValueError):
        ShorthandRule().check_file(sheet)

def test_check_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        ShorthandRule().check_file(tmp_path / 'missing.html')
