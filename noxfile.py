import nox

PYTHON_VERSIONS = ["3.10", "3.11", "3.12", "3.13"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run(
        "pytest",
        "--cov=gql_schema_explorer",
        "--cov-report=term-missing",
        "--cov-fail-under=90",
        *session.posargs,
    )
