"""
app
~~~

A small application showing a region selector for a JSON file of records.

    python -m region_tree regions.json --layout line float --select 12 15
"""

import argparse
import json
import logging

from region_tree import logger as _region_logger

def load_records(filename):
    """Read records from a JSON file holding either a list of records, or an
    object with the list under the key `"regions"`."""
    with open(filename, "rt", encoding="utf-8") as records_file:
        data = json.load(records_file)
    if isinstance(data, dict):
        data = data.get("regions", [])
    if not isinstance(data, list):
        raise ValueError("Expected a list of records in '{}'".format(filename))
    return data

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Select regions from a JSON file of records.")
    parser.add_argument("input", help="JSON file of flat or nested records")
    parser.add_argument("--options", help="JSON file of widget options")
    parser.add_argument("--layout", nargs="*", choices=["line", "float", "block"],
        help="layout strategy for each depth")
    parser.add_argument("--delay", type=int, help="milliseconds before a pop-out hides")
    parser.add_argument("--width", type=int, help="widget width in pixels")
    parser.add_argument("--select", nargs="*", default=[], help="ids to select initially")
    parser.add_argument("--quiet", action="store_true", help="only log warnings")
    parser.add_argument("--log", help="log to this file instead of stdout")
    return parser.parse_args(argv)

def _coerce_ids(ids, index):
    # Ids typed on the command line are strings; match them to integer ids
    known = { str(region_id) : region_id for region_id in index.ids() }
    return [known.get(i, i) for i in ids]

def run(argv=None):
    args = parse_args(argv)
    level = logging.WARNING if args.quiet else logging.DEBUG
    if args.log:
        _region_logger.log_to_file(args.log, level=level)
    else:
        _region_logger.log_to_true_stdout(level=level)
    log = logging.getLogger(__name__)
    log.info("Started...")

    # Import these now so we run the logging code above as quickly as possible
    import tkinter as tk
    from region_tree.options import Options
    from region_tree.region import RegionSelector
    from region_tree.tk import util

    overrides = { key : value for key, value in (("layout", args.layout),
        ("delay", args.delay), ("width", args.width)) if value is not None }
    options = Options(args.options, **overrides)

    root = tk.Tk()
    root.title("Regions")
    root.columnconfigure(0, weight=1)
    root.rowconfigure(0, weight=1)
    selector = RegionSelector(root, options)
    selector.view.frame.grid(row=0, column=0, sticky=util.NSEW, padx=5, pady=5)
    selector.callback = lambda : log.info("Selected: %s", selector.get_selected())

    selector.load(load_records(args.input))
    if args.select:
        selector.set_selected(_coerce_ids(args.select, selector.index))
    util.centre_window(root, width=options.width + 10)
    root.mainloop()
    log.info("Final selection: %s", selector.get_selected())
