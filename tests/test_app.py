import io
import sys

import pytest

from bombo.app import BomboApp, Console, main, parse_choice
from bombo.core.errors import InvalidInput
from bombo.core.settings import Settings

QUIET = Settings(seed=1, animation=False, pause=False)


def run_app(text, rng, cfg=QUIET):
    out = io.StringIO()
    app = BomboApp(Console(io.StringIO(text), out, cfg), rng)
    code = app.run()
    return code, out.getvalue(), app


def script(*lines):
    return "\n".join(lines) + "\n"


def test_full_session_roster_and_range(tmp_path, scripted):
    out_csv = tmp_path / "result.csv"
    rng = scripted([1, 2])
    code, output, app = run_app(
        script(
            "1",
            "1", "Ann", "Bob Lee", "Cid", "",
            "3",
            "6", str(out_csv),
            "0",
            "2",
            "1", "3",
            "3",
            "0",
            "0",
        ),
        rng,
    )
    assert code == 0
    assert "Ganador: Bob Lee" in output
    assert "Número ganador: 3" in output
    assert "Estado: total 3 / disponibles 2 / extraídos 1" in output
    assert "Estado: N=3 / sin repetir=sí / disponibles=2 / extraídos=1" in output
    assert out_csv.read_bytes() == b"1,Bob Lee\n"
    assert rng.calls == [(0, 2), (0, 2)]
    assert "Programa finalizado." in output


def test_invalid_options_redisplay_menu(scripted):
    code, output, _ = run_app(script("9", "abc", "1", "7", "0", "0"), scripted([]))
    assert code == 0
    assert output.count("[InvalidInput] Opción inválida.") == 3
    assert output.count("Menú principal") == 4


def test_end_of_input_exits_cleanly(scripted):
    code, output, _ = run_app("", scripted([]))
    assert code == 0
    assert "Programa finalizado." in output


def test_end_of_input_inside_mode(scripted):
    code, _, app = run_app(script("1", "1", "Ann"), scripted([]))
    assert code == 0
    assert app.roster.snapshot().all == ("Ann",)


def test_errors_are_reported_and_recovered(tmp_path, scripted):
    missing = tmp_path / "missing.txt"
    code, output, app = run_app(
        script(
            "1", "3", "2", str(missing), "0",
            "2", "3", "1", "0", "1", "-5", "1", "x", "0",
            "0",
        ),
        scripted([]),
    )
    assert code == 0
    assert "[EmptyPool]" in output
    assert "[IoError]" in output
    assert str(missing) in output
    assert "[NotConfigured]" in output
    assert output.count("[DomainError]") == 2
    assert "[InvalidInput] 'x' no es un número entero." in output
    assert app.range.n == 0


def test_huge_n_is_reported_not_fatal(scripted):
    code, output, app = run_app(script("2", "1", "99999999999", "3", "0", "0"), scripted([]))
    assert code == 0
    assert "[DomainError] N no puede superar" in output
    assert "[NotConfigured]" in output
    assert app.range.n == 0
    assert app.range.snapshot().pool == ()


def test_filename_is_first_token(tmp_path, scripted, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "names.txt").write_text("Ann\nBob\n", encoding="utf-8")
    code, output, app = run_app(script("1", "2", "names.txt ignored", "0", "0"), scripted([]))
    assert app.roster.snapshot().all == ("Ann", "Bob")
    assert "Cargados 2 nombre(s); disponibles ahora: 2." in output


def test_view_lists_and_state_survives_reentry(scripted):
    code, output, app = run_app(
        script(
            "1", "1", "Ann", "Bob", "", "3", "0",
            "1", "4", "2", "4", "3", "4", "1", "5", "0",
            "0",
        ),
        scripted([0]),
    )
    assert code == 0
    assert "1. Bob" in output
    assert "1. Ann\n2. Bob" in output
    assert app.roster.snapshot().pool == ("Ann", "Bob")
    assert app.roster.snapshot().history == ()


def test_range_toggle_and_sorted_view(scripted):
    rng = scripted([4, 0, 2, 2])
    code, output, app = run_app(
        script(
            "2", "1", "5",
            "3", "3",
            "2",
            "3", "3",
            "4",
            "0", "0",
        ),
        rng,
    )
    assert code == 0
    assert app.range.snapshot().history == (5, 1, 2, 2)
    assert "1, 2, 2, 5" in output
    assert "Sin repetir: no" in output
    assert "disponibles=-" in output
    assert rng.calls == [(0, 4), (0, 3), (1, 5), (1, 5)]


def test_ticker_runs_when_enabled(scripted):
    cfg = Settings(seed=1, animation=True, animation_frames=3, animation_delay_ms=0, pause=False)
    code, output, _ = run_app(script("1", "1", "Ann", "", "3", "0", "0"), scripted([0]), cfg)
    assert output.count(">>> Ann") == 3


def test_pause_consumes_a_line(scripted):
    cfg = Settings(seed=1, animation=False, pause=True)
    # cada operación espera Enter antes de volver al menú
    code, output, app = run_app(script("1", "1", "Ann", "", "", "0", "0"), scripted([]), cfg)
    assert code == 0
    assert "Presione Enter para continuar..." in output
    assert app.roster.snapshot().all == ("Ann",)


def test_parse_choice():
    assert parse_choice(" 2 ") == 2
    with pytest.raises(InvalidInput):
        parse_choice("dos")


def test_main_returns_zero(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdout", out)
    assert main(["--seed", "3", "--no-animation", "--no-pause"]) == 0
    assert "Programa finalizado." in out.getvalue()


def test_main_reports_output_failure(monkeypatch):
    class BrokenOut(io.StringIO):
        def write(self, s):
            raise BrokenPipeError("pipe cerrado")

    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    monkeypatch.setattr(sys, "stdout", BrokenOut())
    assert main(["--no-pause", "--no-animation"]) == 1
