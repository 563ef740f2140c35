from dataclasses import dataclass

DEFAULT_LEN_X = 500
DEFAULT_LEN_Y = 500
DEFAULT_LEN_T = 10
DEFAULT_OUTPUT = "output.otj_grid"

USAGE = """Options:
\t-x X : Sets width of grid to X in the x direction
\t-y Y : Sets width of grid to Y in the y direction
\t-t T : Sets number of timesteps to T
\t-o FILE : Writes the final grid to FILE (default: output.otj_grid)"""


class InvalidOptionError(ValueError):
    """Opção de linha de comando desconhecida ou com valor inválido."""


@dataclass(frozen=True)
class GridOptions:
    len_x: int = DEFAULT_LEN_X
    len_y: int = DEFAULT_LEN_Y
    len_t: int = DEFAULT_LEN_T
    output: str = DEFAULT_OUTPUT


def _positive_int(flag, raw):
    try:
        value = int(raw)
    except ValueError:
        raise InvalidOptionError(f"The {flag} option expects an integer, got '{raw}'.") from None
    if value <= 0:
        raise InvalidOptionError(f"The {flag} option must be positive, got {value}.")
    return value


def parse_grid_options(argv):
    """
    Lê -x, -y, -t e -o de argv (argv[0] é o nome do programa).
    Qualquer outra coisa levanta InvalidOptionError.
    """
    values = {}
    int_flags = {"-x": "len_x", "-y": "len_y", "-t": "len_t"}

    i = 1
    while i < len(argv):
        flag = argv[i]
        if flag not in int_flags and flag != "-o":
            raise InvalidOptionError(f"I'm sorry, I don't recognize the {flag} option.")
        if i + 1 >= len(argv):
            raise InvalidOptionError(f"The {flag} option expects a value.")

        if flag == "-o":
            values["output"] = argv[i + 1]
        else:
            values[int_flags[flag]] = _positive_int(flag, argv[i + 1])
        i += 2

    go = GridOptions(**values)

    # A fórmula i*len_x + (j-1) passa do fim da grade quando
    # (len_x - len_y) * (len_x - 1) >= 2; recusamos todo len_x > len_y por simplicidade
    if go.len_x > go.len_y:
        raise InvalidOptionError(
            f"Grid width ({go.len_x}) cannot exceed grid height ({go.len_y})."
        )

    return go


def print_usage(message=None):
    if message:
        print(message)
    print(USAGE)
