#!/usr/bin/env python3
import argparse, csv, logging, os
from delvegen.mapgen.generator import GeneratorKind, generate_grid, make_level
from delvegen.point import WorldPoint
from delvegen.rng import RandomGenerator

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def _build(args):
    dim = WorldPoint(args.width, args.height) if args.width and args.height else None
    kind = GeneratorKind(args.kind) if args.kind else None
    return make_level(RandomGenerator(args.seed), args.level, dim, kind=kind)

def cmd_emit(args):
    grid = _build(args)
    write_tsv(grid.as_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_ascii(args):
    grid = _build(args)
    print("\n".join(grid.to_lines()))
    print(f"level={grid.level} dark={grid.is_dark} up={grid.up_stair_pos} down={grid.down_stair_pos}")

def cmd_golden(args):
    base = os.path.join(args.outdir, str(args.seed))
    os.makedirs(base, exist_ok=True)
    for lvl in range(args.levels):
        grid = generate_grid(args.seed, lvl)
        path = os.path.join(base, f"{lvl:02d}.tsv")
        write_tsv(grid.as_matrix(), path)
    print(f"Wrote golden pack to {base}")

def _level_args(p):
    p.add_argument('--seed', type=int, default=1)
    p.add_argument('--level', type=int, default=1)
    p.add_argument('--width', type=int)
    p.add_argument('--height', type=int)
    p.add_argument('--kind', choices=[k.value for k in GeneratorKind])

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    _level_args(p1)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('ascii')
    _level_args(p2)
    p2.set_defaults(func=cmd_ascii)
    p3 = sub.add_parser('golden')
    p3.add_argument('--seed', type=int, required=True)
    p3.add_argument('--levels', type=int, default=4)
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_golden)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

if __name__ == '__main__':
    main()
