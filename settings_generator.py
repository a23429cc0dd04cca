# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from machine_settings import MachineSettings, save_config
from rotor_and_reflector import ALPHABET
from wheel_catalog import reflector_names, rotor_names

N_ROTORS = 3
MAX_PAIRS = len(ALPHABET) // 2

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(
    rng: Random | SystemRandom,
    *,
    pairs: int = 10,
    stepping: str = "pairwise",
) -> MachineSettings:
    """Draw one daily key: wheel order, rings, plugs and start positions."""
    rotors = rng.sample(rotor_names(), N_ROTORS)
    return MachineSettings(
        rotors=rotors,
        reflector=rng.choice(reflector_names()),
        positions="".join(rng.choices(ALPHABET, k=len(rotors))),
        ring_set=[rng.randint(1, len(ALPHABET)) for _ in rotors],
        plugs=choose_pairs(pairs, rng),
        stepping=stepping,
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a daily rotor machine key")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    p.add_argument(
        "--pairs",
        type=int,
        default=10,
        help=f"Number of plugboard pairs, 0-{MAX_PAIRS} (default: 10)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    if not 0 <= args.pairs <= MAX_PAIRS:
        sys.exit(f"❌  --pairs must be between 0 and {MAX_PAIRS}.")

    cfg = generate_settings(build_rng(args.seed), pairs=args.pairs)
    save_config(cfg, args.outfile)
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg.rotors}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   rings       : {cfg.ring_set}\n"
        f"   positions   : {cfg.positions}\n"
        f"   plug pairs  : {len(cfg.plugs)}")


if __name__ == "__main__":
    main()
