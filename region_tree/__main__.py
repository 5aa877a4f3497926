from region_tree.app import run

run()
