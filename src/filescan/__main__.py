from filescan.cli.app import app

app(prog_name="filescan")
