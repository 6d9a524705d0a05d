"""Centralized vocabulary registry for the layout scheme parser.

Each word is declared once with its role.  The lookup tables used by the
parser and the printer are derived from the registry so the two never
drift apart.
"""

from . import ast_nodes as ast

# Roles:
#   container_head  - establishes a container node, remaining elements are children
#   leaf_head       - establishes a leaf; after the head it appends a sibling leaf
#   indexed_head    - establishes a leaf that reads one numeric argument
#   parameter       - modifies the node already established at this level

_KEYWORD_REGISTRY = {
    # --- containers ---
    'h':    ('container_head', ast.HorizontalForward),
    'hr':   ('container_head', ast.HorizontalReverse),
    'v':    ('container_head', ast.VerticalForward),
    'vr':   ('container_head', ast.VerticalReverse),
    'm':    ('container_head', ast.Monocle),

    # --- leaves ---
    'c':    ('leaf_head', ast.ClientSlot),
    '...':  ('leaf_head', ast.Rest),
    'nth':  ('indexed_head', ast.ClientNth),
    'max':  ('indexed_head', ast.ClientCount),

    # --- parameters ---
    'w:':   ('parameter', 'weight'),
    'f:':   ('parameter', 'floating'),
}


def _role(role):
    return {
        word: target for word, (r, target) in _KEYWORD_REGISTRY.items()
        if r == role
    }


_CONTAINER_HEADS = _role('container_head')
_LEAF_HEADS = _role('leaf_head')
_INDEXED_HEADS = _role('indexed_head')
_PARAMETERS = _role('parameter')

# Reverse map used by the printer: node class -> head word.
_HEAD_FOR_KIND = {
    cls: word
    for table in (_CONTAINER_HEADS, _LEAF_HEADS, _INDEXED_HEADS)
    for word, cls in table.items()
}

# Number of numeric arguments read by each parameter.
_PARAMETER_ARITY = {
    'weight': 1,
    'floating': 4,
}
