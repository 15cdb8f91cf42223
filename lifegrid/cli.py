"""Interactive command starting a simulation."""

import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .game import GameOfLife
from .storage import GridFileError

InputFunc = Callable[[], str]

BLUE = "\033[34m"
RESET = "\033[0m"
BANNER = (
    "       ░▒▓█▓▒░▒▓████████▓▒░▒▓█▓▒░░▒▓█▓▒░      ░▒▓███████▓▒░░▒▓████████▓▒░      ░▒▓█▓▒░       ░▒▓██████▓▒░       ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░▒▓████████▓▒░ ",
    "       ░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░             ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░▒▓█▓▒░        ",
    "       ░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░             ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░       ░▒▓█▓▒▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░        ",
    "       ░▒▓█▓▒░▒▓██████▓▒░ ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓██████▓▒░        ░▒▓█▓▒░      ░▒▓████████▓▒░       ░▒▓█▓▒▒▓█▓▒░░▒▓█▓▒░▒▓██████▓▒░   ",
    "░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░             ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░        ░▒▓█▓▓█▓▒░ ░▒▓█▓▒░▒▓█▓▒░        ",
    "░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░             ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░        ░▒▓█▓▓█▓▒░ ░▒▓█▓▒░▒▓█▓▒░        ",
    " ░▒▓██████▓▒░░▒▓████████▓▒░░▒▓██████▓▒░       ░▒▓███████▓▒░░▒▓████████▓▒░      ░▒▓████████▓▒░▒▓█▓▒░░▒▓█▓▒░         ░▒▓██▓▒░  ░▒▓█▓▒░▒▓████████▓▒░ ",
)


def _ask(prompt: str, input_func: InputFunc, out: TextIO) -> str:
    out.write(prompt)
    out.flush()
    return input_func()


def _first_token(answer: str) -> Optional[str]:
    tokens = answer.split()
    return tokens[0] if tokens else None


def ask_path(argv_path: Optional[str], input_func: InputFunc, out: TextIO) -> str:
    """Return an existing file path, prompting until one is given."""
    if argv_path:
        if Path(argv_path).exists():
            return argv_path
        out.write("!! Le fichier passé en argument n'existe pas !\n")
    out.write(" !! Aucun fichier valide trouvé !\n")
    while True:
        candidate = _first_token(_ask("\nVeuillez entrer le chemin du fichier : ", input_func, out))
        if candidate is None:
            continue
        if Path(candidate).exists():
            out.write("Fichier trouvé avec succes !\n")
            return candidate
        out.write(f"!! Le fichier '{candidate}' est introuvable\n")


def ask_iterations(input_func: InputFunc, out: TextIO) -> int:
    """Return a strictly positive number of iterations."""
    answer = _ask("\nEntrez le nombre maximum d'iterations : ", input_func, out)
    while True:
        token = _first_token(answer)
        try:
            value = int(token) if token is not None else 0
        except ValueError:
            value = 0
        if value > 0:
            return value
        answer = _ask("!! Entree invalide. Entrez un entier positif : ", input_func, out)


def ask_toroidal(input_func: InputFunc, out: TextIO) -> bool:
    """Ask whether the grid wraps at its edges."""
    answer = _ask("\nVoulez-vous activer le mode torique ? (o/n) : ", input_func, out).strip()
    while not answer or answer[0] not in "oOnN":
        answer = _ask(
            "\n!! Entrée invalide. Repondez par 'o' (oui) ou 'n' (non) : ", input_func, out
        ).strip()
    if answer[0] in "oO":
        out.write("Mode Torique activé\n")
        return True
    out.write("Mode Classique\n")
    return False


def ask_mode(input_func: InputFunc, out: TextIO) -> int:
    """Ask for the display mode: 1 for the console, 2 for a window."""
    out.write("\nChoisissez le mode d'affichage :\n")
    out.write("[1] -> Mode Console\n")
    out.write("[2] -> Mode Fênetre Graphique\n")
    answer = _ask("Votre choix : ", input_func, out)
    while _first_token(answer) not in ("1", "2"):
        answer = _ask("!! Choix inconnu. Veuillez taper 1 ou 2 : ", input_func, out)
    return int(_first_token(answer))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the interactive game; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    out = sys.stdout
    out.write("\n")
    for line in BANNER:
        out.write(BLUE + line + "\n")
    out.write(RESET + "\n")

    try:
        path = ask_path(args[0] if args else None, input, out)
        max_iterations = ask_iterations(input, out)
        toroidal = ask_toroidal(input, out)
        game = GameOfLife(path, max_iterations, toroidal)
        mode = ask_mode(input, out)
    except EOFError:
        sys.stderr.write("\nEntrée interrompue -> Abandon !\n")
        return 1
    except GridFileError as exc:
        sys.stderr.write(f"!! {exc}\n")
        return 1

    if mode == 1:
        game.play_console()
        out.write("\nSimulation terminée. Verifiez le dossier de sortie (Data/..)\n")
    else:
        out.write("\nLancement de la fenetre graphique... \n")
        out.write("Fermez la fenetre pour quitter\n")
        game.play_graphic()
        out.write("\nFenetre fermée -> Fin du programme !\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())