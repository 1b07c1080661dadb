"""Command-line entry point for greptile_cli."""

import asyncio

import click

from greptile_cli.config import GreptileSettings, load_settings
from greptile_cli.errors import GreptileCliError
from greptile_cli.logging import configure_logging, level_for_verbosity
from greptile_cli.orchestrator import IndexPolicy, QueryResult, RepositoryAssistant


async def _ask(
    settings: GreptileSettings,
    path: str,
    repository: str | None,
    question: str,
    system_prompt: str | None,
    policy: IndexPolicy,
) -> QueryResult:
    async with RepositoryAssistant(settings, path=path) as assistant:
        identity = assistant.resolve(repository)
        click.echo(identity.repo_id, err=True)
        return await assistant.ask(
            question,
            identity,
            system_prompt=system_prompt,
            policy=policy,
        )


@click.command()
@click.argument("repository", required=False)
@click.option("-q", "--question", prompt="Question", help="Question to ask about the repository.")
@click.option("--system", "system_prompt", default=None, help="System message sent before the question.")
@click.option(
    "--path",
    default=".",
    type=click.Path(file_okay=False),
    help="Working copy used when REPOSITORY is omitted.",
)
@click.option("--reindex", is_flag=True, default=False, help="Always submit the repository for indexing.")
@click.option("--skip-index", is_flag=True, default=False, help="Never submit the repository for indexing.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON.")
def cli(
    repository: str | None,
    question: str,
    system_prompt: str | None,
    path: str,
    reindex: bool,
    skip_index: bool,
    verbose: bool,
    json_logs: bool,
) -> None:
    """Ask Greptile a question about REPOSITORY (owner/name).

    Without REPOSITORY, the origin remote of the git working copy is used.
    Requires GH_TOKEN and GREPTILE_API_TOKEN.
    """
    if reindex and skip_index:
        raise click.UsageError("--reindex and --skip-index are mutually exclusive")

    configure_logging(level=level_for_verbosity(verbose), json_output=json_logs)

    if reindex:
        policy = IndexPolicy.ALWAYS
    elif skip_index:
        policy = IndexPolicy.NEVER
    else:
        policy = IndexPolicy.IF_MISSING

    try:
        settings = load_settings()
        result = asyncio.run(_ask(settings, path, repository, question, system_prompt, policy))
    except GreptileCliError as e:
        raise click.ClickException(str(e)) from e

    click.echo(result.answer)


if __name__ == "__main__":
    cli()
