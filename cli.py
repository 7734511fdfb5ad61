import argparse
import logging
import sys

from pydantic import ValidationError

from algorithms import WeightConverter
from config import DEFAULT_CONFIG_PATH, ScoringConfigLoader
from exceptions import ConfigError, PreconditionError
from models import PersonContext, ExerciseDifficulty, RecoveryContext
from scoring_service import ScoringService


def one_rm(service: ScoringService, load: float, reps: int, rir: int | None, method: str | None) -> None:
    value = service.estimate_one_rep_max(load, reps, rir, method)
    line = f"Estimated 1RM: {value:.2f} kg"
    if service.is_low_confidence(reps):
        line += " (low confidence)"
    print(line)


def score(
    service: ScoringService,
    one_rm_kg: float,
    bodyweight: float,
    sex: str,
    age: int,
    standard: float,
) -> None:
    person = PersonContext(bodyweight_kg=bodyweight, sex=sex, age=age)
    result = service.strength_score(one_rm_kg, person, ExerciseDifficulty(strength_standard=standard))
    info = service.rank_info(result.score)
    print(f"Score: {result.score:.2f}")
    print(f"Rank: {info.tier.value} ({info.progress:.0f}% to next tier)")


def rank(service: ScoringService, value: float) -> None:
    info = service.rank_info(value)
    print(f"Rank: {info.tier.value} ({info.progress:.0f}% to next tier, colour {info.color})")


def recovery(
    service: ScoringService,
    hours: float,
    rpe: float,
    isolation: bool,
    eccentric: bool,
    training_age: float,
    sleep: float,
) -> None:
    context = RecoveryContext(
        is_compound=not isolation,
        is_eccentric_heavy=eccentric,
        training_age_years=training_age,
        sleep_hours=sleep,
    )
    state = service.recovery_state(hours, rpe, context)
    print(f"Recovered: {state.fraction * 100:.1f}% ({state.status.value}, tau {state.tau_hours:.1f} h)")


def decay(service: ScoringService, value: float, days: float, age: int, training_age: float) -> None:
    factor = service.decay_factor(days, age, training_age)
    print(f"Retention: {factor:.3f}")
    print(f"Decayed score: {service.apply_decay(value, days, age, training_age):.2f}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Strength scoring utilities")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--quiet", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    orm = sub.add_parser("one-rm")
    orm.add_argument("--load", type=float, required=True)
    orm.add_argument("--reps", type=int, required=True)
    orm.add_argument("--rir", type=int)
    orm.add_argument("--method", choices=["brzycki", "epley"])

    scr = sub.add_parser("score")
    scr.add_argument("--one-rm", dest="one_rm", type=float, required=True)
    scr.add_argument("--bodyweight", type=float, required=True)
    scr.add_argument("--sex", choices=["male", "female", "other"], default="male")
    scr.add_argument("--age", type=int, default=25)
    scr.add_argument("--standard", type=float, default=1.0)

    rnk = sub.add_parser("rank")
    rnk.add_argument("--score", type=float, required=True)

    rec = sub.add_parser("recovery")
    rec.add_argument("--hours", type=float, required=True)
    rec.add_argument("--rpe", type=float, default=7)
    rec.add_argument("--isolation", action="store_true")
    rec.add_argument("--eccentric", action="store_true")
    rec.add_argument("--training-age", dest="training_age", type=float, default=1.0)
    rec.add_argument("--sleep", type=float, default=7.0)

    dec = sub.add_parser("decay")
    dec.add_argument("--score", type=float, required=True)
    dec.add_argument("--days", type=float, required=True)
    dec.add_argument("--age", type=int, required=True)
    dec.add_argument("--training-age", dest="training_age", type=float, required=True)

    conv = sub.add_parser("convert")
    conv.add_argument("--weight", type=float, required=True)
    conv.add_argument("--unit", choices=["kg", "lb"], required=True)

    sub.add_parser("validate-config")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    if args.cmd == "convert":
        if args.unit == "kg":
            print(f"{args.weight} kg = {WeightConverter.kg_to_lb(args.weight, 2)} lb")
        else:
            print(f"{args.weight} lb = {WeightConverter.lb_to_kg(args.weight, 2)} kg")
        return 0

    try:
        config = ScoringConfigLoader(args.config).load()
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    service = ScoringService(config)

    if args.cmd == "validate-config":
        print(f"Configuration {args.config} is valid (version {config.version})")
    elif args.cmd == "one-rm":
        one_rm(service, args.load, args.reps, args.rir, args.method)
    elif args.cmd == "score":
        try:
            score(service, args.one_rm, args.bodyweight, args.sex, args.age, args.standard)
        except (PreconditionError, ValidationError) as e:
            print(f"Cannot score: {e}", file=sys.stderr)
            return 2
    elif args.cmd == "rank":
        rank(service, args.score)
    elif args.cmd == "recovery":
        recovery(
            service,
            args.hours,
            args.rpe,
            args.isolation,
            args.eccentric,
            args.training_age,
            args.sleep,
        )
    elif args.cmd == "decay":
        decay(service, args.score, args.days, args.age, args.training_age)
    return 0


if __name__ == "__main__":
    sys.exit(main())
