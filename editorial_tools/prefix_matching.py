import typer
import pandas as pd
from abc import ABC

app = typer.Typer(help="Find every occurrence of a pattern in a text with the KMP prefix function.")

class PrefixMatchingBase(ABC):
    def check_pattern(self, pattern):
        if not pattern:
            raise ValueError("Pattern must be a non-empty string.")

    def build_failure_table(self, pattern):
        self.check_pattern(pattern)
        m = len(pattern)
        failure = [0] * m
        length = 0
        i = 1
        while i < m:
            if pattern[i] == pattern[length]:
                length += 1
                failure[i] = length
                i += 1
            elif length != 0:
                length = failure[length - 1]
            else:
                failure[i] = 0
                i += 1
        return failure

    def check_failure_table(self, pattern, failure):
        if len(failure) != len(pattern):
            raise ValueError(f"Failure table has {len(failure)} entries, pattern has {len(pattern)} characters.")
        for i, value in enumerate(failure):
            if not 0 <= value <= i:
                raise ValueError(f"Failure table entry {i} is {value}, expected a value in 0..{i}.")

    def run(self, text, pattern, failure=None):
        positions = self.find_all(text, pattern, failure)
        return positions, len(positions)

class KMPMatching(PrefixMatchingBase):
    def find_all(self, text, pattern, failure=None):
        """A supplied failure table should come from build_failure_table; only its length and ranges are checked."""
        self.check_pattern(pattern)
        if failure is None:
            failure = self.build_failure_table(pattern)
        else:
            self.check_failure_table(pattern, failure)
        n = len(text)
        m = len(pattern)
        matches = []
        text_index = 0
        pattern_index = 0
        while text_index < n:
            if text[text_index] == pattern[pattern_index]:
                text_index += 1
                pattern_index += 1
                if pattern_index == m:
                    matches.append(text_index - m)
                    # keep the border so overlapping occurrences are found
                    pattern_index = failure[m - 1]
            elif pattern_index > 0:
                pattern_index = failure[pattern_index - 1]
            else:
                text_index += 1
        return matches

class NaiveMatching(PrefixMatchingBase):
    def find_all(self, text, pattern, failure=None):
        self.check_pattern(pattern)
        m = len(pattern)
        return [k for k in range(len(text) - m + 1) if text[k:k + m] == pattern]

def failure_table_frame(pattern, failure):
    return pd.DataFrame({
        "Index": list(range(len(pattern))),
        "Char": list(pattern),
        "LPS": failure,
    })

def first_token(value):
    tokens = value.split()
    return tokens[0] if tokens else ""

@app.command("search")
def search(
    text: str = typer.Argument(None, help="Text to search in (prompted for if omitted)"),
    pattern: str = typer.Argument(None, help="Pattern to search for (prompted for if omitted)"),
    table: bool = typer.Option(False, "--table", help="Also print the failure table as a table."),
    naive: bool = typer.Option(False, "--naive", help="Find positions with the brute-force scan."),
):
    # prompted input is one whitespace token stream, so both may share a line
    if text is None:
        tokens = typer.prompt("Enter text string").split()
        text = tokens[0] if tokens else ""
        if pattern is None and len(tokens) > 1:
            pattern = tokens[1]
    if pattern is None:
        pattern = first_token(typer.prompt("Enter pattern string"))

    matcher = NaiveMatching() if naive else KMPMatching()
    try:
        failure = matcher.build_failure_table(pattern)
        positions, count = matcher.run(text, pattern, failure)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("LPS array: " + " ".join(str(v) for v in failure))
    if table:
        typer.echo(failure_table_frame(pattern, failure).to_string(index=False))
    typer.echo("Pattern found at indices: " + " ".join(str(p) for p in positions))
    if count == 0:
        typer.echo("No occurrences found.")

if __name__ == "__main__":
    app()
