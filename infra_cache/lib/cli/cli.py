import logging

import click
import hiyapyco
from dacite import DaciteError

from infra_cache.lib.config import config_from_dict
from infra_cache.lib.elasticache import ConfigurationError, resolve_topology, validate_replication_group
from infra_cache.modules.aws.elasticache.config import ReplicationGroups

logger = logging.getLogger(__name__)


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def validate(files):
    """Resolve and validate the replication groups described in FILES.

    Later files are merged over earlier ones. Replication groups merge by list position: the first group of a
    later file overrides the first group of an earlier one.
    """
    logger.debug("Merging %s", files)
    raw_config = hiyapyco.load(list(files), method=hiyapyco.METHOD_MERGE) or {}

    try:
        config = config_from_dict(raw_config, ReplicationGroups)
    except (DaciteError, ValueError) as e:
        raise click.ClickException(f"invalid configuration: {e}")

    failures = 0
    for rg in config.replication_groups:
        click.echo()
        echo_key_value("Replication Group", rg.name)

        topology = resolve_topology(rg)
        try:
            validate_replication_group(rg, topology)
        except ConfigurationError as e:
            failures += 1
            click.echo(click.style("INVALID: ", fg="red", bold=True) + str(e))
            continue

        echo_key_value("Node Groups", topology.num_node_groups)
        echo_key_value("Replicas Per Node Group", topology.replicas_per_node_group)
        echo_key_value("Automatic Failover", topology.automatic_failover_enabled)
        echo_key_value("Multi-AZ", topology.multi_az_enabled)

    if failures:
        raise click.ClickException(f"{failures} of {len(config.replication_groups)} replication groups are invalid")


def run():
    exit(cli())


if __name__ == "__main__":
    run()
