from pathlib import Path
from typing import Optional, Tuple
import csv

from whsim.experiments.report import FIELDNAMES, to_rows
from whsim.sim.engine import SimResult
from whsim.config.scenario import ScenarioSpec
from whsim.warehouse.warehouse import Warehouse


def run_scenario(spec: ScenarioSpec, out_csv: Optional[Path] = None,
                 days: Optional[int] = None) -> Tuple[Warehouse, SimResult]:
    """
    Construye el almacén del escenario y lo corre `days` días
    (por defecto spec.days). Si hay out_csv, escribe una fila por día y estante.
    """
    spec.validate()
    wh = spec.build()
    res = wh.run_simulation(spec.days if days is None else days)

    if out_csv is not None:
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        with out_csv.open("w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=FIELDNAMES)
            w.writeheader()
            for day in res.days:
                w.writerows(r.to_dict() for r in to_rows(day))
    return wh, res
