import argparse
from pathlib import Path
from whsim.config.scenario import ScenarioSpec
from whsim.config.config_loader import load_config

def main(argv=None):
    parser = argparse.ArgumentParser(description="Validar e imprimir el escenario del almacén.")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args(argv)

    spec = ScenarioSpec.default() if not args.config else ScenarioSpec.from_dict(load_config(args.config))
    spec.validate()
    print(spec.summary())

if __name__ == "__main__":
    main()
