"""Enumerated attribute values and their canonical DOT tokens."""

from __future__ import annotations

from enum import Enum


class DotToken(Enum):
    """Base for enumerations whose value is the DOT token itself."""

    def dot_string(self) -> str:
        return self.value


class ArrowType(DotToken):
    """Arrowhead and arrowtail shapes."""

    NORMAL = "normal"
    DOT = "dot"
    ODOT = "odot"
    NONE = "none"
    EMPTY = "empty"
    DIAMOND = "diamond"
    EDIAMOND = "ediamond"
    BOX = "box"
    OPEN = "open"
    VEE = "vee"
    INV = "inv"
    INVDOT = "invdot"
    INVODOT = "invodot"
    TEE = "tee"
    INVEMPTY = "invempty"
    ODIAMOND = "odiamond"
    CROW = "crow"
    OBOX = "obox"
    HALFOPEN = "halfopen"


class ClusterMode(DotToken):
    """Cluster handling mode (``clusterrank``)."""

    LOCAL = "local"
    GLOBAL = "global"
    NONE = "none"


class CompassPoint(DotToken):
    """Side of a node or port an edge is aimed at."""

    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"
    C = "c"
    # Let graphviz pick a side adjacent to the node exterior.
    NONE = "_"


class Direction(DotToken):
    """Which ends of an edge get arrows (``dir``)."""

    FORWARD = "forward"
    BACK = "back"
    BOTH = "both"
    NONE = "none"


class ImagePosition(DotToken):
    """Placement of an image inside its node (``imagepos``)."""

    TOP_LEFT = "tl"
    TOP_CENTERED = "tc"
    TOP_RIGHT = "tr"
    MIDDLE_LEFT = "ml"
    MIDDLE_CENTERED = "mc"
    MIDDLE_RIGHT = "mr"
    BOTTOM_LEFT = "bl"
    BOTTOM_CENTERED = "bc"
    BOTTOM_RIGHT = "br"


class ImageScale(DotToken):
    """How an image fills its node (``imagescale``)."""

    WIDTH = "width"
    HEIGHT = "height"
    BOTH = "both"


class LabelJustification(DotToken):
    LEFT = "l"
    RIGHT = "r"
    CENTER = "c"


class LabelLocation(DotToken):
    TOP = "t"
    CENTER = "c"
    BOTTOM = "b"


class Ordering(DotToken):
    IN = "in"
    OUT = "out"


class OutputMode(DotToken):
    """Order in which nodes and edges are drawn (``outputorder``)."""

    BREADTH_FIRST = "breadthfirst"
    NODES_FIRST = "nodesfirst"
    EDGES_FIRST = "edgesfirst"


class PackMode(DotToken):
    """Granularity used when packing components (``packmode``)."""

    NODE = "node"
    CLUSTER = "clust"
    GRAPH = "graph"


class PageDirection(DotToken):
    """Row/column major order for paging (``pagedir``)."""

    BOTTOM_LEFT = "BL"
    BOTTOM_RIGHT = "BR"
    TOP_LEFT = "TL"
    TOP_RIGHT = "TR"
    RIGHT_BOTTOM = "RB"
    RIGHT_TOP = "RT"
    LEFT_BOTTOM = "LB"
    LEFT_TOP = "LT"


class RatioMode(DotToken):
    """Keyword forms of the ``ratio`` attribute."""

    FILL = "fill"
    COMPRESS = "compress"
    EXPAND = "expand"
    AUTO = "auto"


class RankDir(DotToken):
    """Layout direction of a directed graph (``rankdir``)."""

    TOP_BOTTOM = "TB"
    LEFT_RIGHT = "LR"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"


class Shape(DotToken):
    """Node shapes, spelled as graphviz documents them."""

    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAINTEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLE_CIRCLE = "doublecircle"
    DOUBLE_OCTAGON = "doubleoctagon"
    TRIPLE_OCTAGON = "tripleoctagon"
    INV_TRIANGLE = "invtriangle"
    INV_TRAPEZIUM = "invtrapezium"
    INV_HOUSE = "invhouse"
    M_DIAMOND = "Mdiamond"
    M_SQUARE = "Msquare"
    M_CIRCLE = "Mcircle"
    RECORD = "record"
    M_RECORD = "Mrecord"
    RECT = "rect"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX3D = "box3d"
    COMPONENT = "component"
    PROMOTER = "promoter"
    CDS = "cds"
    TERMINATOR = "terminator"
    UTR = "utr"
    PRIMER_SITE = "primersite"
    RESTRICTION_SITE = "restrictionsite"
    FIVE_P_OVERHANG = "fivepoverhang"
    THREE_P_OVERHANG = "threepoverhang"
    N_OVERHANG = "noverhang"
    ASSEMBLY = "assembly"
    SIGNATURE = "signature"
    INSULATOR = "insulator"
    RIBOSITE = "ribosite"
    RNASTAB = "rnastab"
    PROTEASE_SITE = "proteasesite"
    PROTEINSTAB = "proteinstab"
    R_PROMOTER = "rpromoter"
    R_ARROW = "rarrow"
    L_ARROW = "larrow"
    L_PROMOTER = "lpromoter"


class Splines(DotToken):
    """Edge routing (``splines``)."""

    LINE = "line"
    SPLINE = "spline"
    NONE = "none"
    CURVED = "curved"
    POLYLINE = "polyline"
    ORTHO = "ortho"


class NodeStyle(DotToken):
    BOLD = "bold"
    DASHED = "dashed"
    DIAGONALS = "diagonals"
    DOTTED = "dotted"
    FILLED = "filled"
    INVISIBLE = "invis"
    ROUNDED = "rounded"
    SOLID = "solid"
    STRIPED = "striped"
    RADIAL = "radial"
    WEDGED = "wedged"


class EdgeStyle(DotToken):
    BOLD = "bold"
    DASHED = "dashed"
    DOTTED = "dotted"
    INVISIBLE = "invis"
    SOLID = "solid"
    TAPERED = "tapered"


class GraphStyle(DotToken):
    FILLED = "filled"
    RADIAL = "radial"
    ROUNDED = "rounded"
    STRIPED = "striped"
