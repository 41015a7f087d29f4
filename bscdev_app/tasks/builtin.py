"""Built-in tasks."""

import yaml

from ..config.loader import config_to_dict
from ..logging import get_task_logger
from .registry import TaskContext, task


@task("accounts", "Prints the list of accounts")
async def accounts(context: TaskContext) -> None:
    """Print the address of every signer on the active network, one per line."""
    log = get_task_logger(__name__, "accounts", context.network.name)

    signers = await context.signers().get_signers()
    if not signers:
        log.info("No signing identities configured")

    for signer in signers:
        print(signer.address, file=context.out)


@task("networks", "Prints the declared networks")
async def networks(context: TaskContext) -> None:
    for name, network in context.config.networks.items():
        marker = "*" if name == context.config.default_network else " "
        chain = network.chain_id if network.chain_id is not None else "-"
        signers = "remote" if network.remote_accounts else len(network.accounts)
        print(f"{marker} {name}\tchain={chain}\tsigners={signers}\turl={network.url or '-'}",
              file=context.out)


@task("config", "Prints the resolved configuration with secrets redacted")
async def show_config(context: TaskContext) -> None:
    yaml.safe_dump(
        config_to_dict(context.config, redact=True),
        context.out,
        sort_keys=False,
    )
