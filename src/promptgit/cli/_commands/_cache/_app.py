from cyclopts import App

app = App(name="cache", help="Inspect and clear the branch cache.")
