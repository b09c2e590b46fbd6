import sys
import logging
import click
import requests
from athlete.auth import Authenticator
from athlete.client import ApiClient
from athlete.config import load_config
from athlete.errors import AthleteError


def parse_params(ctx, param, values):
    params = {}
    for item in values:
        if '=' not in item:
            raise click.BadParameter(f"expected key=value, got '{item}'")
        key, value = item.split('=', 1)
        params[key] = value
    return params


param_option = click.option('--param', 'params', multiple=True, callback=parse_params,
                            help='Query parameter as key=value (repeatable)')


@click.group(context_settings=dict(help_option_names=['--help']))
@click.option('--profile', required=True, help='Profile name from .config.yaml')
@click.option('--config', 'config_path', default='.config.yaml',
              help='Path to configuration file')
@click.option('--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, profile, config_path, verbose):
    """CLI tool for signing and sending Athlete.com API requests."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        conf = load_config(profile, config_path)
        auth = Authenticator(
            public_key=conf['public_key'],
            private_key=conf['private_key'],
            endpoint=conf.get('endpoint', '')
        )
    except AthleteError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    ctx.obj = {
        'profile': profile,
        'conf': conf,
        'auth': auth,
        'client': ApiClient(auth,
                            verify=conf.get('verify_ssl', True),
                            timeout=conf.get('timeout', 30))
    }


@cli.command('sign')
@click.argument('path')
@click.option('--method', default='GET', help='HTTP method')
@param_option
@click.pass_context
def sign_cmd(ctx, path, method, params):
    """Print the signed URL for a request."""
    click.echo(ctx.obj['auth'].sign(path, method, params))


@cli.command('string-to-sign')
@click.argument('path')
@click.option('--method', default='GET', help='HTTP method')
@click.option('--timestamp', type=click.DateTime(formats=['%Y-%m-%dT%H:%M:%SZ']),
              default=None, help='UTC timestamp, e.g. 2009-09-28T19:03:12Z')
@param_option
@click.pass_context
def string_to_sign_cmd(ctx, path, method, timestamp, params):
    """Print the canonical string that would be signed."""
    click.echo(ctx.obj['auth'].string_to_sign(path, method, params, timestamp=timestamp))


def _send(client, method, path, params, data=None):
    try:
        resp = client.request(method, path, params, data=data)
    except requests.RequestException as e:
        click.echo(f"Request failed: {e}", err=True)
        sys.exit(1)
    click.echo(resp.text)


@cli.command('get')
@click.argument('path')
@param_option
@click.pass_context
def get_cmd(ctx, path, params):
    """Send a signed GET request and print the response body."""
    _send(ctx.obj['client'], 'GET', path, params)


@cli.command('request')
@click.argument('method')
@click.argument('path')
@param_option
@click.option('--data', default=None, help='Request body')
@click.pass_context
def request_cmd(ctx, method, path, params, data):
    """Send a signed request with any HTTP method."""
    _send(ctx.obj['client'], method, path, params, data=data)


if __name__ == '__main__':
    cli()
