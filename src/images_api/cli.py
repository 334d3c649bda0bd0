# cli.py
import asyncio
import json
import logging

import click
import uvicorn

from images_api.config.settings import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
def cli():
    """CLI commands for the Images API"""
    pass


@cli.command()
@click.option('--host', default=None, help='Bind address (defaults to HOST setting)')
@click.option('--port', default=None, type=int, help='Port (defaults to PORT setting)')
@click.option('--reload/--no-reload', default=False, help='Enable/disable auto-reload for development')
def serve(host, port, reload):
    """Start the Images API server"""
    settings = get_settings()
    configure_logging(settings.log_level)

    host = host or settings.host
    port = port or settings.port

    logger.info("Listening on port %d...", port)
    uvicorn.run(
        "images_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command()
def show_config():
    """Show current configuration"""
    settings = get_settings()

    print("Current Configuration:")
    print(f"  ImageKit URL Endpoint: {settings.imagekit_url_endpoint}")
    print(f"  ImageKit Public Key: {settings.imagekit_public_key}")
    print(f"  ImageKit Private Key: {settings.masked_private_key}")
    print(f"  Host: {settings.host}")
    print(f"  Port: {settings.port}")
    print(f"  Max Body Bytes: {settings.max_body_bytes}")
    print(f"  CORS Allow Origins: {', '.join(settings.cors_allow_origins)}")
    print(f"  Route Allowed Origin: {settings.route_allowed_origin}")
    print(f"  Delete Failure Status Code: {settings.delete_failure_status_code}")
    print(f"  Log Level: {settings.log_level}")


@cli.command()
def auth_params():
    """Print a freshly signed set of upload parameters"""
    from images_api.adapters.imagekit import ImageKitClient

    settings = get_settings()
    configure_logging(settings.log_level)
    client = ImageKitClient.from_settings(settings)
    click.echo(client.get_authentication_parameters().model_dump_json(indent=2))


@cli.command()
@click.argument('file_id')
def delete_image(file_id):
    """Delete an image from ImageKit by FILE_ID"""
    from images_api.adapters.imagekit import DeletionFailed, ImageKitClient
    from images_api.routers.images import to_delete_response

    settings = get_settings()
    configure_logging(settings.log_level)
    client = ImageKitClient.from_settings(settings)
    outcome = asyncio.run(client.delete_file(file_id))

    click.echo(json.dumps(to_delete_response(outcome).model_dump(mode="json"), indent=2))
    if isinstance(outcome, DeletionFailed):
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
