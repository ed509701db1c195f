import math

ALPHA = "α"
BETA = "β"
GAMMA = "γ"
NONE = "none"
ANGLE_NAMES = (ALPHA, BETA, GAMMA, NONE)

TAU = 2 * math.pi
R3 = math.sqrt(3)
R3_HALF = math.sqrt(3) / 2


def dist_sq(p, q):
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    return dx * dx + dy * dy


def squared_side_lengths(triangle):
    """(a², b², c²) with side a opposite vertex 0, b opposite 1, c opposite 2."""
    A, B, C = triangle
    return dist_sq(B, C), dist_sq(A, C), dist_sq(A, B)


def normalized_squared_sides(triangle):
    """Squared side lengths scaled to sum to 1, or None for a degenerate triangle."""
    a_sq, b_sq, c_sq = squared_side_lengths(triangle)
    sq_sum = a_sq + b_sq + c_sq
    if not sq_sum:
        return None
    scale = 1 / sq_sum
    return scale * a_sq, scale * b_sq, scale * c_sq


def obtuse_angle(a_sq, b_sq, c_sq) -> str:
    # At most one of these can hold; on float ties the first match wins.
    if a_sq > b_sq + c_sq:
        return ALPHA
    if b_sq > a_sq + c_sq:
        return BETA
    if c_sq > a_sq + b_sq:
        return GAMMA
    return NONE


def angles_from_squared_sides(aa, bb, cc):
    """
    Interior angles (radians) from squared side lengths that sum to 1.

    Inverts the law of cosines: with aa + bb + cc = 1,
    cos(alpha) = (b² + c² - a²) / (2bc) = (0.5 - aa) / sqrt(bb * cc).
    Returns None if a cosine falls outside [-1, 1] or is undefined.
    """
    cosines = []
    for own, p, q in ((aa, bb, cc), (bb, aa, cc), (cc, aa, bb)):
        denom = math.sqrt(p * q)
        if denom == 0:
            return None
        cosines.append((0.5 - own) / denom)
    if any(abs(c) > 1 for c in cosines):
        return None
    return tuple(math.acos(c) for c in cosines)


def centroid(triangle):
    xs, ys = zip(*triangle)
    return sum(xs) / 3, sum(ys) / 3


def scale_triangle(triangle, k):
    return tuple((k * x, k * y) for x, y in triangle)


def translate_triangle(triangle, dx, dy):
    return tuple((x + dx, y + dy) for x, y in triangle)


def triangle_angles_deg(triangle):
    """Interior angles at vertex 0, 1, 2 in degrees, for any non-degenerate triangle."""
    def safe_acos(x):
        x = max(-1.0, min(1.0, x))
        return math.degrees(math.acos(x))

    a_sq, b_sq, c_sq = squared_side_lengths(triangle)
    a, b, c = math.sqrt(a_sq), math.sqrt(b_sq), math.sqrt(c_sq)
    A = safe_acos((b_sq + c_sq - a_sq) / (2 * b * c))
    B = safe_acos((a_sq + c_sq - b_sq) / (2 * a * c))
    C = 180.0 - A - B
    return A, B, C
