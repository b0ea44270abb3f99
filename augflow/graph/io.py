"""Reading and writing networks.

Two input formats are supported:

Edge-list text, the classic judge format::

    V E
    u0 v0 c0
    ...

where the header gives the vertex and edge counts and each following line is
one edge. Blank lines and ``#`` comments are skipped.

YAML (or JSON) documents::

    num_nodes: 4
    edges:
      - [0, 1, 3]
      - [1, 3, 2]
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple, Union

import yaml

from augflow.errors import InvalidNetworkError
from augflow.graph.network import FlowNetwork

YAML_SUFFIXES = {".yaml", ".yml", ".json"}


def _tokens(lines: Iterable[str]) -> Iterable[Tuple[int, List[str]]]:
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if line:
            yield lineno, line.split()


def _parse_ints(tokens: List[str], lineno: int, expected: int) -> List[int]:
    if len(tokens) != expected:
        raise InvalidNetworkError(
            f"Line {lineno}: expected {expected} integers, got {len(tokens)} tokens"
        )
    try:
        return [int(tok) for tok in tokens]
    except ValueError:
        raise InvalidNetworkError(
            f"Line {lineno}: non-integer token in {' '.join(tokens)!r}"
        ) from None


def read_edge_list(lines: Iterable[str]) -> FlowNetwork:
    """Parse edge-list text into a `FlowNetwork`.

    Args:
        lines: Iterable of text lines (a file object works).

    Returns:
        The validated network.

    Raises:
        InvalidNetworkError: On a missing header, malformed line, edge-count
            mismatch, or any network validation failure.
    """
    rows = _tokens(lines)
    try:
        lineno, header = next(rows)
    except StopIteration:
        raise InvalidNetworkError("Empty edge list: missing 'V E' header") from None
    num_nodes, num_edges = _parse_ints(header, lineno, 2)
    if num_edges < 0:
        raise InvalidNetworkError(f"Line {lineno}: negative edge count {num_edges}")

    edges: List[Tuple[int, int, int]] = []
    for lineno, tokens in rows:
        if len(edges) == num_edges:
            raise InvalidNetworkError(
                f"Line {lineno}: more edges than the {num_edges} declared in the header"
            )
        u, v, c = _parse_ints(tokens, lineno, 3)
        edges.append((u, v, c))

    if len(edges) != num_edges:
        raise InvalidNetworkError(
            f"Header declares {num_edges} edges but {len(edges)} were given"
        )
    return FlowNetwork(num_nodes, edges)


def write_edge_list(network: FlowNetwork) -> List[str]:
    """Render ``network`` in edge-list text format, one string per line."""
    lines = [f"{network.num_nodes} {network.num_edges}"]
    lines.extend(f"{e.src} {e.dst} {e.capacity}" for e in network.edges)
    return lines


def load_network(path: Union[str, Path]) -> FlowNetwork:
    """Load a network from a file.

    ``.yaml``, ``.yml`` and ``.json`` files are parsed as documents with
    ``num_nodes`` and ``edges`` keys; anything else as edge-list text.

    Raises:
        InvalidNetworkError: If the content is malformed or not UTF-8 text.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidNetworkError(f"{path}: not valid UTF-8 text: {exc}") from exc
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidNetworkError(f"{path}: invalid YAML/JSON: {exc}") from exc
        return FlowNetwork.from_dict(data or {})
    return read_edge_list(text.splitlines())
