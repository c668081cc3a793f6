from linkcrawl.main import run

run()
