"""
Тесты для CLI

Проверяет:
1. Результат — единственная строка на stdout
2. Ошибки — одна строка "error: ..." на stderr, код != 0, stdout пуст
3. Чтение из файла и из stdin
4. --separator, --explain
"""

import io
import json

import pytest

from polyconst.cli import EXIT_ERROR, EXIT_OK, main


def _run(monkeypatch, capsys, document, *argv):
    text = document if isinstance(document, str) else json.dumps(document)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


# =============================================================================
# УСПЕШНЫЕ ЗАПУСКИ
# =============================================================================


class TestCliSuccess:
    """Тесты успешных запусков."""

    def test_even_degree(self, monkeypatch, capsys):
        document = {
            "keys": {"n": 2, "k": 3},
            "1": {"base": 10, "value": "4"},
            "2": {"base": 10, "value": "21"},
            "3": {"base": 10, "value": "8"},
        }
        code, out, err = _run(monkeypatch, capsys, document)
        assert code == EXIT_OK
        assert out == "84\n"
        assert err == ""

    def test_odd_degree(self, monkeypatch, capsys):
        document = {
            "keys": {"k": 2},
            "1": {"base": "2", "value": "1010"},
            "2": {"base": "10", "value": "1"},
        }
        code, out, _ = _run(monkeypatch, capsys, document)
        assert code == EXIT_OK
        assert out == "-10\n"

    def test_degree_zero(self, monkeypatch, capsys):
        code, out, _ = _run(monkeypatch, capsys, {"keys": {"k": 1}})
        assert code == EXIT_OK
        assert out == "0\n"

    def test_large_product_printed_in_full(self, monkeypatch, capsys):
        digits = "z" * 3000
        document = {
            "keys": {"k": 3},
            "1": {"base": 36, "value": digits},
            "2": {"base": 36, "value": digits},
            "3": {"base": 10, "value": "1"},
        }
        code, out, _ = _run(monkeypatch, capsys, document)
        assert code == EXIT_OK
        assert int(out) == (36 ** 3000 - 1) ** 2

    def test_reads_file(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "roots.json"
        path.write_text(
            json.dumps({"keys": {"k": 2}, "5": {"base": 16, "value": "F_F"}, "6": {"base": 2, "value": "1"}}),
            encoding="utf-8",
        )
        code, out, _ = _run(monkeypatch, capsys, "", str(path))
        assert code == EXIT_OK
        assert out == "-255\n"

    def test_custom_separator(self, monkeypatch, capsys):
        document = {"keys": {"k": 2}, "1": {"base": 10, "value": "1,000"}, "2": {"base": 10, "value": "1"}}
        code, out, _ = _run(monkeypatch, capsys, document, "--separator", ",")
        assert code == EXIT_OK
        assert out == "-1000\n"

    def test_explain(self, monkeypatch, capsys):
        document = {"keys": {"k": 3}, "2": {"base": 10, "value": "21"}, "1": {"base": 10, "value": "4"}, "9": {}}
        code, out, err = _run(monkeypatch, capsys, document, "--explain")
        assert code == EXIT_OK
        assert out == "84\n"
        assert "degree=2" in err
        assert "roots used: [1, 2]" in err
        assert "hex 54" in err


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestCliErrors:
    """Тесты поверхности ошибок."""

    @pytest.mark.parametrize(
        "text, fragment",
        [
            ("", "no input"),
            ("{not json", "invalid JSON"),
            ('{"1": {"base": 10, "value": "1"}}', "missing parameter keys"),
            ('{"keys": {"k": 0}}', "invalid k"),
            ('{"keys": {"k": "x"}}', "invalid k"),
            ('{"keys": {"k": 3}, "1": {"base": 10, "value": "4"}}', "need at least k=3, found 1"),
            ('{"keys": {"k": 2}, "1": {"base": 10}, "2": {}}', "malformed root entry at key 1"),
            ('{"keys": {"k": 2}, "1": {"base": 37, "value": "1"}, "2": {}}', "base must be between 2 and 36"),
            ('{"keys": {"k": 2}, "1": {"base": 2, "value": "12"}, "2": {}}', "not valid for base 2"),
            ('{"keys": {"k": 2}, "1": {"base": 16, "value": "g"}, "2": {}}', "invalid digit 'g'"),
        ],
    )
    def test_error_reported(self, monkeypatch, capsys, text, fragment):
        code, out, err = _run(monkeypatch, capsys, text)
        assert code == EXIT_ERROR
        assert out == ""
        assert err.startswith("error: ")
        assert fragment in err
        assert err.count("\n") == 1

    def test_invalid_utf8_file(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "roots.json"
        path.write_bytes(b'{"keys": {"k": 1}, "x": "\xff"}')
        code, out, err = _run(monkeypatch, capsys, "", str(path))
        assert code == EXIT_ERROR
        assert out == ""
        assert err.startswith("error: ")
        assert "UTF-8" in err

    def test_invalid_utf8_stdin(self, monkeypatch, capsys):
        raw = io.TextIOWrapper(io.BytesIO(b'{"keys": {"k": 1}, "x": "\xff"}'), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", raw)
        code = main([])
        out, err = capsys.readouterr()
        assert code == EXIT_ERROR
        assert out == ""
        assert err.startswith("error: ")
        assert "UTF-8" in err

    def test_binary_stdin_with_bom(self, monkeypatch, capsys):
        document = {"keys": {"k": 2}, "1": {"base": 2, "value": "1010"}, "2": {}}
        raw = io.TextIOWrapper(io.BytesIO(b"\xef\xbb\xbf" + json.dumps(document).encode("utf-8")), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", raw)
        code = main([])
        out, _ = capsys.readouterr()
        assert code == EXIT_OK
        assert out == "-10\n"

    def test_unreadable_file(self, monkeypatch, capsys, tmp_path):
        code, out, err = _run(monkeypatch, capsys, "", str(tmp_path / "missing.json"))
        assert code == EXIT_ERROR
        assert out == ""
        assert "cannot read" in err

    def test_bad_separator(self, monkeypatch, capsys):
        code, out, err = _run(monkeypatch, capsys, {"keys": {"k": 1}}, "--separator", "a")
        assert code == EXIT_ERROR
        assert out == ""
        assert "digit symbol" in err

    def test_usage_error_exit_code(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, capsys, "", "--no-such-flag")
        assert exc_info.value.code == 2
