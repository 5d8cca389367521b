# cli.py
import click
import logging
from filestore_api.config.settings import configure_logging, get_settings

# Configure logging
logger = logging.getLogger(__name__)

@click.group()
def cli():
    """CLI commands for the Files API"""
    pass

@cli.command()
def show_config():
    """Show current configuration"""
    settings = get_settings()

    print("Current Configuration:")
    print(f"  App Name: {settings.app_name}")
    print(f"  Storage Backend: {settings.storage_backend}")
    print(f"  Storage Dir: {settings.storage_dir}")
    print(f"  Host: {settings.host}")
    print(f"  Port: {settings.port}")
    print(f"  CORS Origins: {', '.join(settings.cors_allow_origins)}")
    print(f"  Log Level: {settings.log_level}")

@cli.command()
@click.option("--host", default=None, help="Bind host (defaults to HOST setting)")
@click.option("--port", type=int, default=None, help="Bind port (defaults to PORT setting)")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes")
def serve(host, port, reload):
    """Run the Files API with uvicorn"""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)

    host = host or settings.host
    port = port or settings.port
    logger.info(f"Starting Files API on {host}:{port}, storage at {settings.storage_dir}")

    uvicorn.run(
        "filestore_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    cli()
