from typing import Callable, Dict, Iterator, List, Optional, Sequence, TextIO
import argparse
import logging
import sys
import time

from bombo.core.errors import DrawError, InvalidInput
from bombo.core.rng import RandomSource
from bombo.core.settings import Settings, make_rng, settings
from bombo.services.draw_engine import (
    draw_from_range, draw_from_roster, preview_range, preview_roster,
)
from bombo.services.range_store import RangeStore
from bombo.services.roster_io import iter_interactive_names
from bombo.services.roster_store import RosterStore

logger = logging.getLogger(__name__)

BOX_WIDTH = 70
TITLE = "Bombo: sistema de sorteos en modo texto"


# ---------------- Consola ----------------
def configure_utf8_output(stream: TextIO) -> None:
    """Fuerza UTF-8 en la salida antes de escribir nada."""
    if sys.platform == "win32":
        import ctypes
        ctypes.windll.kernel32.SetConsoleOutputCP(65001)
        ctypes.windll.kernel32.SetConsoleCP(65001)
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")


class Console:
    """Entrada por líneas y dibujo de pantallas; sin estado de sorteo."""

    def __init__(self, stdin: TextIO, stdout: TextIO, cfg: Optional[Settings] = None):
        cfg = cfg or settings
        self.stdin = stdin
        self.stdout = stdout
        self.pause_enabled = cfg.pause
        self.animation = cfg.animation
        self.frames = cfg.animation_frames
        self.delay_ms = cfg.animation_delay_ms

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Una línea sin el salto final; ``None`` en fin de entrada."""
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def iter_lines(self, prompt: str) -> Iterator[str]:
        while True:
            line = self.read_line(prompt)
            if line is None:
                return
            yield line

    def read_token(self, prompt: str) -> Optional[str]:
        """Primera palabra de la línea (los nombres de archivo no llevan espacios)."""
        line = self.read_line(prompt)
        if line is None:
            return None
        parts = line.split()
        if not parts:
            raise InvalidInput("No se ingresó ningún valor.")
        return parts[0]

    def read_int(self, prompt: str) -> Optional[int]:
        token = self.read_token(prompt)
        if token is None:
            return None
        try:
            return int(token)
        except ValueError:
            raise InvalidInput(f"'{token}' no es un número entero.") from None

    def header(self, title: str, subtitle: str = "") -> None:
        inner = BOX_WIDTH - 2
        self.write()
        self.write("+" + "-" * inner + "+")
        for text in (TITLE, "", title, subtitle):
            self.write("|" + text.center(inner)[:inner] + "|")
        self.write("+" + "-" * inner + "+")

    def status(self, left: str, right: str = "") -> None:
        self.write("-" * 60)
        if right:
            left = left + " " * max(1, 60 - len(left)) + right
        self.write(left)

    def menu(self, items: Sequence[str], prompt: str = "Opción: ") -> Optional[int]:
        for item in items:
            self.write(item)
        self.write()
        line = self.read_line(prompt)
        if line is None:
            return None
        return parse_choice(line)

    def numbered(self, values: Sequence, empty_msg: str) -> None:
        if not values:
            self.write(empty_msg)
            return
        for i, v in enumerate(values, start=1):
            self.write(f"{i}. {v}")

    def error(self, err: DrawError) -> None:
        self.write(f"\n{err}")

    def pause(self, msg: str = "Presione Enter para continuar...") -> None:
        if not self.pause_enabled:
            return
        self.read_line(f"\n{msg}")

    def ticker(self, values: Iterator) -> None:
        """Animación previa al sorteo; puramente cosmética."""
        if not self.animation:
            return
        for i, value in enumerate(values):
            self.stdout.write(f"\r>>> {value}" + " " * 27)
            self.stdout.flush()
            time.sleep((self.delay_ms + (i // 10) * 10) / 1000.0)
        self.stdout.write("\n")
        self.stdout.flush()


def parse_choice(line: str) -> int:
    try:
        return int(line.strip())
    except ValueError:
        raise InvalidInput("Opción inválida.") from None


# ---------------- Sesiones ----------------
class Session:
    """Máquina de estados de un menú: menú -> operación -> menú, o salida con 0."""

    title = ""
    subtitle = ""
    tag = ""
    items: List[str] = []

    def __init__(self, console: Console, rng: RandomSource):
        self.console = console
        self.rng = rng

    def handlers(self) -> Dict[int, Callable[[], None]]:
        raise NotImplementedError

    def status_line(self) -> str:
        raise NotImplementedError

    def menu_items(self) -> List[str]:
        return self.items

    def run(self) -> None:
        table = self.handlers()
        while True:
            self.console.header(self.title, self.subtitle)
            self.console.status(self.status_line(), self.tag)
            try:
                choice = self.console.menu(self.menu_items())
                if choice is None or choice == 0:
                    return
                handler = table.get(choice)
                if handler is None:
                    raise InvalidInput("Opción inválida.")
                handler()
            except DrawError as e:
                logger.debug("MENU_ERROR kind=%s", e.kind)
                self.console.error(e)
            self.console.pause()


class RosterSession(Session):
    title = "Modo A: sorteo por nómina (sin repetir)"
    subtitle = "Ingreso manual o desde archivo; el sorteado sale del pozo"
    tag = "Modo A"
    items = [
        "1) Ingresar nombres (uno por línea, línea vacía para terminar)",
        "2) Cargar nombres desde archivo (uno por línea)",
        "3) Sortear uno (sin repetir)",
        "4) Ver listas (todos / disponibles / sorteados)",
        "5) Reiniciar sorteo (los sorteados vuelven al pozo)",
        "6) Exportar sorteados (CSV)",
        "0) Volver al menú principal",
    ]

    def __init__(self, console: Console, rng: RandomSource, store: RosterStore):
        super().__init__(console, rng)
        self.store = store

    def handlers(self) -> Dict[int, Callable[[], None]]:
        return {
            1: self.type_names,
            2: self.load_file,
            3: self.draw,
            4: self.view,
            5: self.reset,
            6: self.export,
        }

    def status_line(self) -> str:
        return self.store.snapshot().status_line()

    def _report_added(self, verb: str, added: int) -> None:
        snap = self.store.snapshot()
        self.console.write(f"\n{verb} {added} nombre(s); disponibles ahora: {snap.remaining}.")

    def type_names(self) -> None:
        self.console.header("Ingreso manual", "Un nombre por línea; línea vacía para terminar")
        names = iter_interactive_names(self.console.iter_lines("> "))
        self._report_added("Agregados", self.store.add_many(names))

    def load_file(self) -> None:
        self.console.header("Cargar desde archivo", "Un nombre por línea, p. ej. nombres.txt")
        path = self.console.read_token("Ruta del archivo: ")
        if path is None:
            return
        self._report_added("Cargados", self.store.load_file(path))

    def draw(self) -> None:
        if self.store.pool_size:
            self.console.header("Sorteando (nómina)", "Mezclando candidatos...")
            self.console.ticker(preview_roster(self.store, self.console.frames))
        winner = draw_from_roster(self.store, self.rng)
        self.console.header("Resultado", "¡Felicitaciones!")
        self.console.write(f"\nGanador: {winner}")
        self.console.write(f"Quedan disponibles: {self.store.pool_size}")

    def view(self) -> None:
        self.console.header("Ver listas", "Todos / disponibles / sorteados")
        choice = self.console.menu([
            "1) Nómina completa",
            "2) Disponibles",
            "3) Sorteados",
            "0) Volver",
        ])
        if choice is None or choice == 0:
            return
        snap = self.store.snapshot()
        self.console.write()
        if choice == 1:
            self.console.numbered(snap.all, "(la nómina está vacía)")
        elif choice == 2:
            self.console.numbered(snap.pool, "(el pozo está vacío)")
        elif choice == 3:
            self.console.numbered(snap.history, "(todavía no se sorteó a nadie)")
        else:
            raise InvalidInput("Opción inválida.")

    def reset(self) -> None:
        self.store.reset()
        self.console.header("Reinicio completo", "Los sorteados volvieron al pozo")
        self.console.write(f"Disponibles: {self.store.pool_size}")

    def export(self) -> None:
        self.console.header("Exportar sorteados", "CSV: número,nombre")
        path = self.console.read_token("Archivo de salida (p. ej. resultado.csv): ")
        if path is None:
            return
        self.store.export_history(path)
        self.console.write(f"\nExportado (vacío si no hubo sorteos): {path}")


class RangeSession(Session):
    title = "Modo B: sorteo por rango (1 a N)"
    subtitle = "Repetición opcional; reinicio y estado"
    tag = "Modo B"

    def __init__(self, console: Console, rng: RandomSource, store: RangeStore):
        super().__init__(console, rng)
        self.store = store

    def menu_items(self) -> List[str]:
        flag = "sí" if self.store.no_repeat else "no"
        return [
            "1) Configurar N",
            f"2) Alternar sin repetir (actual: {flag})",
            "3) Sortear una vez",
            "4) Ver números sorteados",
            "5) Reiniciar (vaciar sorteados / reconstruir pozo)",
            "0) Volver al menú principal",
        ]

    def handlers(self) -> Dict[int, Callable[[], None]]:
        return {
            1: self.set_n,
            2: self.toggle,
            3: self.draw,
            4: self.view,
            5: self.reset,
        }

    def status_line(self) -> str:
        return self.store.snapshot().status_line()

    def set_n(self) -> None:
        self.console.header("Configurar N", "Por ejemplo 50 sortea entre 1 y 50")
        n = self.console.read_int("N: ")
        if n is None:
            return
        self.store.set_n(n)
        self.console.write(f"\nN configurado en {n}.")

    def toggle(self) -> None:
        flag = self.store.toggle_no_repeat()
        self.console.write(f"\nSin repetir: {'sí' if flag else 'no'}")

    def draw(self) -> None:
        if self.store.n:
            self.console.header("Sorteando (número)", "Números girando...")
            self.console.ticker(preview_range(self.store, self.console.frames))
        value = draw_from_range(self.store, self.rng)
        subtitle = "¡Felicitaciones!" if self.store.no_repeat else "(se permiten repeticiones)"
        self.console.header("Resultado", subtitle)
        self.console.write(f"\nNúmero ganador: {value}")
        if self.store.no_repeat:
            self.console.write(f"Quedan disponibles: {self.store.pool_size}")

    def view(self) -> None:
        self.console.header("Números sorteados", "De menor a mayor (no altera el orden de extracción)")
        history = self.store.snapshot().sorted_history()
        if not history:
            self.console.write("(todavía no hay sorteos)")
            return
        self.console.write(", ".join(str(v) for v in history))

    def reset(self) -> None:
        self.store.reset()
        snap = self.store.snapshot()
        remaining = "-" if snap.remaining is None else snap.remaining
        self.console.header("Reinicio completo", "Sorteados vaciados y pozo reconstruido")
        self.console.write(f"N={snap.n} / disponibles={remaining}")


# ---------------- Aplicación ----------------
class BomboApp:
    """Dueño único de ambos stores; despacha el menú principal."""

    items = [
        "1) Modo A: sorteo por nómina (sin repetir, archivo/manual, exportable)",
        "2) Modo B: sorteo por rango (1 a N, repetición configurable)",
        "0) Salir",
    ]

    def __init__(self, console: Console, rng: RandomSource):
        self.console = console
        self.rng = rng
        self.roster = RosterStore()
        self.range = RangeStore()
        self._modes: Dict[int, Session] = {
            1: RosterSession(console, rng, self.roster),
            2: RangeSession(console, rng, self.range),
        }

    def run(self) -> int:
        while True:
            self.console.header("Menú principal", "Elija el modo de sorteo")
            try:
                choice = self.console.menu(self.items)
                if choice is None or choice == 0:
                    break
                session = self._modes.get(choice)
                if session is None:
                    raise InvalidInput("Opción inválida.")
            except InvalidInput as e:
                self.console.error(e)
                self.console.pause("Opción inválida; presione Enter para volver...")
                continue
            session.run()
        self.console.write("\nPrograma finalizado.")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bombo", description="Sorteos interactivos en la terminal")
    parser.add_argument("--seed", type=int, default=None, help="Semilla fija para reproducir la sesión")
    parser.add_argument("--no-animation", action="store_true", help="Sin animación previa al sorteo")
    parser.add_argument("--no-pause", action="store_true", help="No esperar Enter tras cada operación")
    parser.add_argument("--log-level", default=None, help="Nivel de logging (DEBUG, INFO, WARNING...)")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    base = base or settings
    update = {}
    if args.seed is not None:
        update["seed"] = args.seed
    if args.no_animation:
        update["animation"] = False
    if args.no_pause:
        update["pause"] = False
    if args.log_level:
        update["log_level"] = args.log_level.upper()
    return base.model_copy(update=update)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = settings_from_args(args)

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        stream=sys.stderr,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        configure_utf8_output(sys.stdout)
        rng = make_rng(cfg)
        logger.info("RNG_SEEDED seed=%s", rng.seed)
        return BomboApp(Console(sys.stdin, sys.stdout, cfg), rng).run()
    except KeyboardInterrupt:
        return 130
    except OSError as e:
        logger.error("OUTPUT_FAILED err=%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
