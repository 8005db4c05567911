import math
import torch


def distance(p1, p2):
    return math.sqrt((p2[0] - p1[0]) ** 2 + (p2[1] - p1[1]) ** 2)


def walls_to_tensors(walls, device):
    """Returns the wall endpoints as two (M,2) float64 tensors (a, b)."""
    wall_a = torch.tensor([tuple(w.a) for w in walls], dtype=torch.float64, device=device).reshape(-1, 2)
    wall_b = torch.tensor([tuple(w.b) for w in walls], dtype=torch.float64, device=device).reshape(-1, 2)
    return wall_a, wall_b


def nearest_intersections(origins, dirs, wall_a, wall_b):
    """
    origins : (N,2) tensor, ray origins
    dirs    : (N,2) tensor, unit ray directions
    wall_a  : (M,2) tensor, first endpoint of the walls
    wall_b  : (M,2) tensor, second endpoint of the walls
    ---
    returns : hits (N,2) tensor of the nearest hit per ray (zeros if no hit),
              hit_mask (N,) bool tensor
    """
    device = origins.device
    N = origins.shape[0]
    M = wall_a.shape[0]
    if M == 0:
        return torch.zeros((N, 2), dtype=origins.dtype, device=device), torch.zeros(N, dtype=torch.bool, device=device)

    # broadcast N×M, walls on columns
    x1 = wall_a[:, 0].unsqueeze(0)       # (1,M)
    y1 = wall_a[:, 1].unsqueeze(0)
    x2 = wall_b[:, 0].unsqueeze(0)
    y2 = wall_b[:, 1].unsqueeze(0)
    x3 = origins[:, 0].unsqueeze(1)      # (N,1)
    y3 = origins[:, 1].unsqueeze(1)
    x4 = x3 + dirs[:, 0].unsqueeze(1)
    y4 = y3 + dirs[:, 1].unsqueeze(1)

    # compute denominator
    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)    # (N,M)

    # compute parameters t (along the wall) and u (along the ray)
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den

    # valid mask, parallel walls excluded by the exact test
    valid = (den != 0) & (t > 0) & (t < 1) & (u > 0)      # (N,M)

    hx = (x1 + t * (x2 - x1)).expand(N, M)
    hy = (y1 + t * (y2 - y1)).expand(N, M)
    dist = torch.sqrt((hx - x3) ** 2 + (hy - y3) ** 2)
    # replace invalid by +inf
    dist = torch.where(valid, dist, torch.full_like(dist, float('inf')))
    # closest wall per ray, first one on ties
    d_min, idx = dist.min(dim=1)        # (N,)

    hit_mask = ~torch.isinf(d_min)
    hits = torch.stack([
        hx.gather(1, idx.unsqueeze(1)).squeeze(1),
        hy.gather(1, idx.unsqueeze(1)).squeeze(1),
    ], dim=1)                           # (N,2)
    # zero if no hit
    hits[~hit_mask] = 0.0

    return hits, hit_mask
