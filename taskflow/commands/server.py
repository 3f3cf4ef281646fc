"""
Server command - Run the web server.
"""
import logging
import uvicorn
from taskflow.__main__ import Command
from taskflow.config import get_settings
from taskflow.logging_config import setup_logging

logger = logging.getLogger(__name__)


class ServerCommand(Command):
    """Run the TaskFlow web server."""

    name = "server"
    
    @classmethod
    def add_arguments(cls, parser):
        """Add server-specific arguments."""
        settings = get_settings()
        parser.add_argument(
            "--host",
            default=settings.host,
            help=f"Host to bind to (default: {settings.host} or TASKFLOW_HOST env var)"
        )
        parser.add_argument(
            "--port",
            type=int,
            default=settings.port,
            help=f"Port to bind to (default: {settings.port} or TASKFLOW_PORT env var)"
        )
        parser.add_argument(
            "--log-level",
            default=settings.log_level.lower(),
            choices=["debug", "info", "warning", "error", "critical"],
            help="Log level (default: INFO or TASKFLOW_LOG_LEVEL env var)"
        )
        parser.add_argument(
            "--no-seed",
            action="store_true",
            help="Start with an empty store instead of the sample data"
        )
    
    def init(self):
        """Initialize the server command."""
        super().init()
        
        from taskflow.app import create_app
        
        settings = get_settings().model_copy(update={
            "log_level": self.args.log_level.upper(),
            "seed_sample_data": get_settings().seed_sample_data and not self.args.no_seed,
        })
        setup_logging(settings)
        self.app = create_app(settings)
        logger.info(f"Server initialized on {self.args.host}:{self.args.port}")
    
    def run(self) -> int:
        """Run the web server."""
        config = uvicorn.Config(
            self.app,
            host=self.args.host,
            port=self.args.port,
            log_level=self.args.log_level,
            log_config=None,
            access_log=True,
            timeout_keep_alive=30,
            timeout_graceful_shutdown=30,
        )
        server = uvicorn.Server(config)
        
        try:
            logger.info(f"Starting server on {self.args.host}:{self.args.port}")
            server.run()
            return 0
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt, shutting down...")
            return 130
