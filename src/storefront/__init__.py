from storefront.utils.logger import setup_logger

storefront_logger = setup_logger("storefront", log_file="storefront.log")

__all__ = ["storefront_logger"]
