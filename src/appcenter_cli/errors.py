import logging
import sys
from functools import wraps

import click

from appcenter_client.exceptions import AppCenterClientError, NetworkError

from appcenter_cli.bundler import BundleError

logger = logging.getLogger(__name__)


def handle_api_exceptions(func):
  @wraps(func)
  def wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except NetworkError as e:
      logger.debug("Network failure", exc_info=True)
      click.echo(f"Connection to App Center could not be established: {click.style(e.message, fg='red')}", err=True)
    except AppCenterClientError as e:
      logger.debug("API failure", exc_info=True)
      status = e.status_code if e.status_code is not None else "error"
      click.echo(f"[{click.style(str(status), fg='red')}] {e.message}", err=True)
    except BundleError as e:
      click.echo(f"[{click.style('bundle', fg='red')}] {e}", err=True)
    sys.exit(1)

  return wrapper
