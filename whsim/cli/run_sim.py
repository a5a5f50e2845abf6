import argparse
from pathlib import Path

from whsim.experiments.plots import plot_occupancy
from whsim.experiments.report import day_report_text, history_text, occupancy_kpis
from whsim.experiments.runner import run_scenario
from whsim.config.config_loader import load_config
from whsim.config.scenario import ScenarioSpec


def main(argv=None):
    parser = argparse.ArgumentParser(description="Correr la simulación diaria del almacén.")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML del escenario (opcional)")
    parser.add_argument("--days", type=int, help="Días a simular (por defecto, los del escenario)")
    parser.add_argument("--history", action="append", default=[], help="Nombre de ítem a consultar (repetible)")
    parser.add_argument("--out-csv", type=Path, help="CSV de ocupación diaria")
    parser.add_argument("--plot", type=Path, help="PNG de ocupación (requiere --out-csv)")
    args = parser.parse_args(argv)
    if args.plot is not None and args.out_csv is None:
        parser.error("--plot requiere --out-csv")

    spec = ScenarioSpec.default() if not args.config else ScenarioSpec.from_dict(load_config(args.config))
    wh, res = run_scenario(spec, out_csv=args.out_csv, days=args.days)

    for day in res.days:
        print(day_report_text(day))

    for name in spec.history_queries + args.history:
        print(history_text(name, wh.item_history_of(name)))

    totals = res.totals()
    kpis = occupancy_kpis(res.days)
    print(f"Días: {totals['days_simulated']}  Eventos parciales: {totals['partial_events']}  "
          f"Costo total: {totals['elapsed_cost']:g}")
    print(f"Utilización promedio: {kpis['util_avg']:.2%}  Terminal máx: {kpis['terminal_max']}")

    if args.plot is not None:
        plot_occupancy(args.out_csv, args.plot)
        print(f"Gráfica en {args.plot}")
    return 0


if __name__ == "__main__":
    main()
