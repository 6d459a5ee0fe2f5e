"""End-to-end tests for the linguist-colors command line, against the fixture catalog."""

import json
import os
from pathlib import Path

import pytest
from linguist_colors.__main__ import main

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
SAMPLE_YML = str(FIXTURES_DIR / 'languages.yml')

_VARS = ('LINGUIST_COLORS_URL', 'LINGUIST_COLORS_TIMEOUT', 'LINGUIST_COLORS_CACHE_DIR')


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run from an empty repo so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    saved = {var: os.environ.pop(var) for var in _VARS if var in os.environ}
    yield
    for var in _VARS:
        os.environ.pop(var, None)
    os.environ.update(saved)


class TestFormats:
    def test_html_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['html', '--catalog', SAMPLE_YML])
        out, err = capsys.readouterr()
        assert '<h2>By Nearest Color</h2>' in out
        assert '<td bgcolor="#3572A5">Python</td>' in out
        assert 'fetching' in err
        assert 'sorting 5 colours' in err
        assert 'skipping Broken' in err

    def test_json_chain(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['json', '--catalog', SAMPLE_YML])
        obj = json.loads(capsys.readouterr().out)
        names = [e['name'] for e in obj['by_nearest']]
        assert names[0] == 'C++'
        assert sorted(names) == ['C++', 'Go', 'Python', "Ren'Py", 'Rust']
        assert obj['summary']['total'] == 7
        assert obj['summary']['colored'] == 5

    def test_text_to_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / 'colors.txt'
        main(['text', '--catalog', SAMPLE_YML, '--out', str(out)])
        assert '5/7 languages coloured' in out.read_text(encoding='utf-8')
        assert capsys.readouterr().out == ''

    def test_swatch(self, tmp_path: Path) -> None:
        out = tmp_path / 'colors.png'
        main(['swatch', '--catalog', SAMPLE_YML, '--out', str(out)])
        assert out.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'

    def test_catalog_from_env_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / '.env').write_text(f'LINGUIST_COLORS_URL={SAMPLE_YML}\n')
        main(['json'])
        out, err = capsys.readouterr()
        assert json.loads(out)['source'] == SAMPLE_YML
        assert 'loaded' in err


class TestErrors:
    def test_strict_fails_on_bad_colour(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['html', '--catalog', SAMPLE_YML, '--strict'])
        assert exc.value.code == 1
        assert "Error: invalid colour '#12G456'" in capsys.readouterr().err

    def test_missing_catalog(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['text', '--catalog', str(tmp_path / 'missing.yml')])
        assert exc.value.code == 1
        assert 'can not read' in capsys.readouterr().err

    def test_malformed_catalog(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        bad = tmp_path / 'bad.yml'
        bad.write_text('- not\n- a mapping\n')
        with pytest.raises(SystemExit):
            main(['text', '--catalog', str(bad)])
        assert 'can not deserialize languages' in capsys.readouterr().err

    def test_swatch_without_out(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(['swatch', '--catalog', SAMPLE_YML])
        assert 'needs --out' in capsys.readouterr().err

    def test_no_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


class TestHelp:
    def test_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('html', 'json', 'swatch', 'text'):
            assert name in out

    def test_module_docs(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'swatch'])
        assert 'Requires --out' in capsys.readouterr().out

    def test_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(['help', 'pdf'])
        assert 'Unknown format: pdf' in capsys.readouterr().err
