'''
Calculator front end tests:  what reaches the output and error streams,
the command line options and the saved state.
'''

import io
import sys

from basecalc import calculator
from basecalc.calculator import Calculator, ParseCommandLine, main
from basecalc.context import Context
from basecalc.display import Display


class Streams(object):
    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.display = Display(self.out, self.err)

    def calculator(self, context=None):
        return Calculator(context or Context(), self.display)


def test_result():
    s = Streams()
    c = s.calculator()
    result = c.execute("1+2")
    assert result.value == 3
    assert s.out.getvalue() == "  3.\n"
    assert s.err.getvalue() == ""
    assert c.context.history == ["1+2"]


def test_blank_line():
    s = Streams()
    c = s.calculator()
    assert c.execute(" _\t") is None
    assert s.out.getvalue() == ""
    assert c.context.history == []


def test_parse_error_caret():
    s = Streams()
    c = s.calculator()
    assert c.execute("1+*2") is None
    assert s.err.getvalue() == "    ^\nInvalid number!\n"


def test_parse_error_echo():
    s = Streams()
    s.calculator().execute("1+", echo=True)
    assert s.err.getvalue() == "> 1+\n    ^\nIncomplete expression!\n"


def test_evaluation_error():
    s = Streams()
    s.calculator().execute("1+2=3")
    assert s.err.getvalue() == "Unknown operator: =\n"


def test_command_message():
    s = Streams()
    c = s.calculator()
    c.execute(":base g")
    assert s.out.getvalue() == "Base set to Hexadecimal (G).\n"
    assert s.err.getvalue() == ""
    assert c.context.base == 16


def test_assignment_display():
    s = Streams()
    c = s.calculator()
    c.execute("@x = 6*7")
    c.execute("@x/2")
    assert s.out.getvalue() == "@x =   42.\n  21.\n"


def test_previous_result():
    s = Streams()
    c = s.calculator()
    c.execute("6")
    c.execute("1/")
    c.execute("&*&")
    assert s.out.getvalue() == "  6.\n  36.\n"


def test_run_stream():
    s = Streams()
    c = s.calculator()
    c.run(io.StringIO("1+1\n\n2*3\r\n(\n"))
    assert s.out.getvalue() == "  2.\n  6.\n"
    assert s.err.getvalue() == "> (\n   ^\nMismatched parentheses!\n"
    assert c.context.history == ["1+1", "2*3", "("]


def test_run_survives_crash(monkeypatch, capsys):
    def crash(line, context):
        raise RuntimeError("boom")
    monkeypatch.setattr(calculator, "calculate", crash)
    s = Streams()
    s.calculator().run(io.StringIO("1\n2\n"))
    assert s.err.getvalue().count("Something bad happened") == 2
    assert "RuntimeError: boom" in capsys.readouterr().err


def test_log():
    s = Streams()
    log = io.StringIO()
    s.display.logon(log)
    s.calculator().execute("1+1")
    s.display.logoff()
    lines = log.getvalue().splitlines()
    assert lines[0].startswith("<< On ")
    assert lines[1:3] == ['--> "1+1"', "  2."]
    assert lines[3].startswith("<< Off ")
    s.display.msg("after")
    assert "after" not in log.getvalue()


def test_options():
    options, args = ParseCommandLine(["-d", "-e", "1", "-e", "2", "-s"])
    assert options.default_config
    assert options.expressions == ["1", "2"]
    assert options.read_stdin
    assert not options.version
    assert options.logfile is None


def test_main_expressions(capsys):
    assert main(["-d", "-e", "2*3", "-e", "1+"]) == 0
    out, err = capsys.readouterr()
    assert out == "  6.\n"
    assert err == "> 1+\n    ^\nIncomplete expression!\n"


def test_main_version(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out == "basecalc version 1.0\n"


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("#sqrt16\n"))
    assert main(["-d", "-s"]) == 0
    assert capsys.readouterr().out == "  4.\n"


def test_main_log(tmp_path, capsys):
    logfile = tmp_path / "session.log"
    main(["-d", "-l", str(logfile), "-e", "1+1"])
    text = logfile.read_text()
    assert '--> "1+1"' in text
    assert "  2.\n" in text
    assert "<< Off " in text


def test_main_saves_state(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BASECALC_HOME", str(tmp_path))
    main(["-e", ":base g"])
    assert (tmp_path / "state").exists()
    main(["-e", "F+1"])
    out = capsys.readouterr().out
    assert out == "Base set to Hexadecimal (G).\n  10.\n"


def test_main_default_config_ignores_state(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BASECALC_HOME", str(tmp_path))
    main(["-e", ":base g"])
    main(["-d", "-e", "F+1"])
    out, err = capsys.readouterr()
    assert "Digit out of decimal (A) range!" in err


def test_main_bad_state(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BASECALC_HOME", str(tmp_path))
    (tmp_path / "state").write_text("{'base': 99}")
    main(["-e", "1"])
    out = capsys.readouterr().out
    assert "Could not read state file" in out
    assert "Using default configuration" in out
    assert out.endswith("  1.\n")


def test_complex_erf_warns_every_time():
    s = Streams()
    c = s.calculator()
    c.execute("#erf[0.1,0.1]")
    c.execute("#erf[0.1,0.1] + #erf[0,1]")
    warning = "Warning: complex gaussian error function is likely incorrect!\n"
    assert s.err.getvalue() == 3*warning
    assert len(s.out.getvalue().splitlines()) == 2
