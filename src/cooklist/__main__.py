from cooklist.cli import run

run()
