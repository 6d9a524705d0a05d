"""Node classes for the layout scheme tree.

The parser builds a tree of these nodes (the scheme).  The binder copies the
scheme into a bound tree of the same classes in which every leaf has become
a ``ClientSlot`` holding one item.
"""

from collections import namedtuple


Rect = namedtuple('Rect', ('x', 'y', 'w', 'h'))


class LayoutNode:
    """Base class for all layout nodes.

    ``weight`` of 0.0 means "default weight" and is read as 1.0 when
    geometry is resolved.  ``floating`` is a ``Rect`` that replaces the
    node's computed share, or ``None``.
    """
    __slots__ = ('weight', 'floating', 'line', 'col')

    is_container = False

    def __init__(self, weight=0.0, floating=None, line=0, col=0):
        self.weight = weight
        self.floating = floating
        self.line = line
        self.col = col

    def accept(self, visitor):
        """Double-dispatch: calls visitor.visit_<NodeType>(self)."""
        method_name = 'visit_' + type(self).__name__
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)

    @property
    def effective_weight(self):
        return self.weight if self.weight != 0 else 1.0

    def _params(self):
        return {
            'weight': self.weight,
            'floating': self.floating,
            'line': self.line,
            'col': self.col,
        }

    def clone(self):
        """Fresh node with the same static fields and no children or item."""
        return type(self)(**self._params())

    def __repr__(self):
        parts = [f"{k}={v!r}" for k, v in self._params().items()
                 if k not in ('line', 'col') and v]
        return f"{type(self).__name__}({', '.join(parts)})"


# ---- Containers ----

class Container(LayoutNode):
    """Node owning an ordered list of children.

    ``axis`` names the coordinate the container splits ('x' or 'y');
    ``None`` means every child gets the whole frame.  ``reverse``
    containers give the last-declared child first pick of the items.
    """
    __slots__ = ('children',)

    is_container = True
    axis = None
    reverse = False

    def __init__(self, children=None, **kw):
        super().__init__(**kw)
        self.children = children or []

    def __repr__(self):
        base = super().__repr__()[:-1]
        sep = ', ' if base[-1] != '(' else ''
        return f"{base}{sep}children={self.children!r})"


class HorizontalForward(Container):
    __slots__ = ()
    axis = 'x'


class HorizontalReverse(Container):
    __slots__ = ()
    axis = 'x'
    reverse = True


class VerticalForward(Container):
    __slots__ = ()
    axis = 'y'


class VerticalReverse(Container):
    __slots__ = ()
    axis = 'y'
    reverse = True


class Monocle(Container):
    __slots__ = ()


# ---- Leaves ----

class Leaf(LayoutNode):
    """Base class for nodes that match items instead of owning children."""
    __slots__ = ()


class ClientSlot(Leaf):
    """Exactly one item.  ``item`` is set only in a bound tree."""
    __slots__ = ('item',)

    def __init__(self, item=None, **kw):
        super().__init__(**kw)
        self.item = item

    def __repr__(self):
        base = super().__repr__()
        if self.item is None:
            return base
        sep = ', ' if base[-2] != '(' else ''
        return f"{base[:-1]}{sep}item={self.item!r})"


class ClientCount(Leaf):
    """Up to ``n`` items from the head of the queue."""
    __slots__ = ('n',)

    def __init__(self, n=0, **kw):
        super().__init__(**kw)
        self.n = n

    def _params(self):
        params = super()._params()
        params['n'] = self.n
        return params


class ClientNth(Leaf):
    """The item at queue position ``n``, counted from the current head."""
    __slots__ = ('n',)

    def __init__(self, n=0, **kw):
        super().__init__(**kw)
        self.n = n

    def _params(self):
        params = super()._params()
        params['n'] = self.n
        return params


class Rest(Leaf):
    """Every item left in the queue."""
    __slots__ = ()
