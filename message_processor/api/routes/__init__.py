from message_processor.api.routes.process import router as process_router

__all__ = ["process_router"]
