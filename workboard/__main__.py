from workboard.main import run

run()
