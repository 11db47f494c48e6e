from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .config_loader import MachineResult, load_specification
from .errors import TuringError
from .machine import DEFAULT_MAX_STEPS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turingsim",
        description="Ejecuta una Máquina de Turing descrita en YAML sobre una o varias cadenas",
    )
    parser.add_argument("config", type=Path, help="Descripción YAML de la máquina")
    parser.add_argument(
        "-s",
        "--string",
        dest="strings",
        action="append",
        metavar="CADENA",
        help="Cadena de entrada (repetible); por defecto, 'simulation_strings' del YAML",
    )
    parser.add_argument("--max-steps", type=int, default=DEFAULT_MAX_STEPS, help="Presupuesto de pasos por cadena")
    parser.add_argument("--no-ids", dest="capture_ids", action="store_false", help="Omite la traza de IDs")
    parser.add_argument("--json", dest="json_output", action="store_true", help="Informe en JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Registro de depuración del motor")
    return parser


def _as_dict(result: MachineResult) -> Dict[str, Any]:
    report = {
        key: getattr(result, key)
        for key in ("accepted", "halted", "reason", "steps", "state", "tape")
    }
    report["ids"] = [{**id_.__dict__, "state": str(id_.state)} for id_ in result.ids]
    return report


def _report_lines(input_string: str, result: MachineResult) -> List[str]:
    title = f"Cadena '{input_string}'"
    rule = "=" * len(title)
    lines = [
        rule,
        title,
        rule,
        f"Aceptada: {'sí' if result.accepted else 'no'}",
        f"Motivo: {result.reason}",
        f"Pasos ejecutados: {result.steps}",
        f"Estado final: {result.state}",
        f"Cinta final: {result.tape}",
    ]
    if result.ids:
        lines.append("Descripciones instantáneas:")
        lines.extend(id_.format() for id_ in result.ids)
    return lines


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.max_steps < 0:
        parser.error("--max-steps debe ser un entero no negativo")

    try:
        spec = load_specification(args.config)
    except OSError as exc:
        parser.error(f"No se pudo leer '{args.config}': {exc}")
    except (ValueError, yaml.YAMLError) as exc:
        parser.error(f"Configuración inválida: {exc}")

    inputs = spec.simulation_strings if args.strings is None else args.strings
    if not inputs:
        parser.error("No se especificaron cadenas para simular: use --string o 'simulation_strings'")

    try:
        results = spec.simulate_inputs(inputs, max_steps=args.max_steps, capture_ids=args.capture_ids)
    except (TuringError, ValueError) as exc:
        parser.error(str(exc))

    if args.json_output:
        payload = {word: _as_dict(result) for word, result in results.items()}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for word, result in results.items():
            print("\n".join(_report_lines(word, result)), end="\n\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
