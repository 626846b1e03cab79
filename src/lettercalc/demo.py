import sys

from .runtime.core import RuntimeContext
from .runtime.interpreter import run_for_cli
from .writer import IndentingWriter, surrounding_box_title

DEFAULT_INPUTS = (
    "3a2c4",
    "32a2d2",
    "500a10b66c32",
    "3ae4c66fb32",
    "3c4d2aee2a4c41fc4f",
)


def run_demo(inputs: tuple[str, ...] | list[str] = DEFAULT_INPUTS) -> list[int | None]:
    writer = IndentingWriter()
    context = RuntimeContext(writer=writer)

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("LETTER ARITHMETIC  (a=+ b=- c=* d=/ e=( f=))")

    results: list[int | None] = []
    with surrounding_box_title(writer):
        for source in inputs:
            results.append(run_for_cli(source, context))
    return results


if __name__ == "__main__":
    run_demo(sys.argv[1:] or DEFAULT_INPUTS)
