"""
Reporting utilities.
"""

from .core.carrier import Carrier
from .core.query import multiplicity
from .core.witness import Certificate


def print_result(a, b, result, carrier: Carrier):
    """Print one multiplicity result with its finiteness."""
    a_s, b_s = carrier.show(a), carrier.show(b)
    kind = "finite" if result.is_finite else "infinite"
    print(f"\n{'='*60}")
    print(f"Carrier: {carrier.name}  ({carrier.description})")
    print(f"multiplicity({a_s}, {b_s}) = {result}  [{kind}]")
    print(f"{'='*60}")


def multiplicity_table(a, upto: int, carrier: Carrier, start: int = 0) -> list:
    """[(b, multiplicity(a, b)) for b = start..upto], integer-like carriers only."""
    return [(b, multiplicity(a, carrier.parse(str(b)), carrier))
            for b in range(start, upto + 1)]


def print_table(a, upto: int, carrier: Carrier, start: int = 0):
    """Print multiplicity(a, b) for a run of b."""
    print(f"\n{'='*60}")
    print(f"multiplicity({carrier.show(a)}, b) over {carrier.name}")
    print(f"{'='*60}")
    for b, m in multiplicity_table(a, upto, carrier, start):
        bar = "#" * m.get() if m.is_finite else "∞"
        print(f"  b = {b:>6}: {str(m):>3s}  {bar}")


def export_dot(cert: Certificate, path="multiplicity.dot", verbose: bool = True):
    """Export the divisibility chain of a certificate as a DOT file for Graphviz."""
    c = cert.carrier
    a, b = c.show(cert.divisor), c.show(cert.dividend)
    with open(path, "w") as f:
        f.write("digraph multiplicity {\n")
        f.write("  rankdir=LR;\n")
        f.write("  node [shape=box, style=rounded];\n")
        target = f"{b}".replace('"', '\\"')
        f.write(f'  "{target}" [shape=ellipse];\n')
        previous = None
        for k, divides in cert.steps:
            label = f"({a})^{k}".replace('"', '\\"')
            color = "lightblue" if divides else "salmon"
            f.write(f'  "{label}" [fillcolor={color}, style=filled];\n')
            style = "solid" if divides else "dashed"
            f.write(f'  "{label}" -> "{target}" [style={style}];\n')
            if previous is not None:
                f.write(f'  "{label}" -> "{previous}" [color=gray];\n')
            previous = label
        f.write("}\n")
    if verbose:
        print(f"Graph exported to {path}")
