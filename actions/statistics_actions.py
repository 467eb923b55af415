import argparse
import json
import pathlib

import yaml
from common import config_tools
from mazes.analysis import analyze, summarize
from mazes.dataset import load_dataset, save_dataset
from actions.utils import add_logging_arguments, setup_logging

#####################################
#####################################
'''
Solve every maze in a dataset and compute statistics about them.

Arguments:
    * mazes: path to the maze dataset (a file or a folder of files, see 'mazes.dataset.load_dataset').
    * output: path to save the information about each maze (as json).
    * -cfg & -ovr: Options. The supported options are:
        - "summary": path to save the summary (as yaml). If not given, it is only printed.
        - "solvable": path to save the solvable mazes as a new dataset.
'''

ANALYZE_OPTIONS = {"summary", "solvable"}

def action_analyze(args: argparse.Namespace):
    setup_logging(args)
    mazes_path: str = args.mazes
    output_path: str = args.output
    config = config_tools.get_config_from_namespace(args, {})
    if not isinstance(config, dict):
        raise config_tools.ConfigError(f"Expected the analysis options to be a mapping, got {type(config).__name__}")
    unknown = set(config) - ANALYZE_OPTIONS
    if unknown:
        raise config_tools.ConfigError(f"Unknown analysis options: {', '.join(sorted(map(str, unknown)))}")

    grids, names = load_dataset(mazes_path)
    if len(grids) == 0:
        print("The dataset is empty, No statistics will be generated.")
        return
    print(f"Solving {len(grids)} mazes ...")

    info = analyze(grids, names)
    stats = summarize(info)

    pathlib.Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(info, f, indent=1)

    summary_path = config.get("summary")
    if summary_path is not None:
        pathlib.Path(summary_path).parent.mkdir(parents=True, exist_ok=True)
        with open(summary_path, 'w') as f:
            yaml.dump(stats, f, sort_keys=False)

    solvable_path = config.get("solvable")
    if solvable_path is not None:
        solvable = [index for index, item in enumerate(info) if item["solvable"]]
        pathlib.Path(solvable_path).parent.mkdir(parents=True, exist_ok=True)
        save_dataset(solvable_path, [grids[index] for index in solvable], [names[index] for index in solvable])
        print(f"Saved {len(solvable)} solvable mazes to {solvable_path}")
    print(yaml.dump(stats, sort_keys=False), end='')

def register_analyze(parser: argparse.ArgumentParser):
    parser.add_argument("mazes", type=str, help="path to the maze dataset")
    parser.add_argument("output", type=str, help="path to save the information about each maze")
    add_logging_arguments(parser)
    config_tools.add_config_arguments(parser)
    parser.set_defaults(func=action_analyze)
