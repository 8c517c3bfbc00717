from .geom import (
    Circle,
    Curvature,
    GeometryDomainError,
    MobiusTransform,
    Point,
    RotCircle,
    SPHERICAL_HORIZON_SCALE,
    euclidean_centre_radius,
)
from .approx import ApproxHashMap, ApproxHashSet, FloatHasher
from .colours import generator_colour, orbit_colour, sinebow
from .search import (
    EmptyGeneratorSetError,
    ExpansionOptions,
    Exploration,
    Grip,
    GripSet,
    OrbitPoint,
    OrbitResult,
    RenderCircle,
    expand_grips,
    expand_seed,
    explore,
    point_packing_radius,
)
from .config import get_default_options, get_float_hasher, set_default_options
from .generators import generate_generators
from .render import generator_outlines, grip_cut_circles, grip_markers, horizon_outline
from .tikz_codegen import generate_tikz_code, generate_tikz_document

__all__ = [
    'ApproxHashMap',
    'ApproxHashSet',
    'Circle',
    'Curvature',
    'EmptyGeneratorSetError',
    'ExpansionOptions',
    'Exploration',
    'FloatHasher',
    'GeometryDomainError',
    'Grip',
    'GripSet',
    'MobiusTransform',
    'OrbitPoint',
    'OrbitResult',
    'Point',
    'RenderCircle',
    'RotCircle',
    'SPHERICAL_HORIZON_SCALE',
    'euclidean_centre_radius',
    'expand_grips',
    'expand_seed',
    'explore',
    'generate_generators',
    'generate_tikz_code',
    'generate_tikz_document',
    'generator_colour',
    'generator_outlines',
    'get_default_options',
    'get_float_hasher',
    'grip_cut_circles',
    'grip_markers',
    'horizon_outline',
    'orbit_colour',
    'point_packing_radius',
    'set_default_options',
    'sinebow',
]
