from cyclopts import App

app = App(name="config", help="Show promptgit configuration.")
