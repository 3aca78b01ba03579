import typer
from editorial_tools import prefix_matching, tree_independent_set

app = typer.Typer(help="Editorial algorithm demos: KMP substring search and maximum independent set on trees.")

app.add_typer(prefix_matching.app, name="kmp", help="Find pattern occurrences with the KMP prefix function")
app.add_typer(tree_independent_set.app, name="mis", help="Maximum independent set on a tree")

if __name__ == "__main__":
    app()
