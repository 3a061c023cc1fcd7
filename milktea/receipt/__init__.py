"""Receipt extraction engine for bubble tea / milk tea receipts."""

from .catalog import Brand, BrandCatalog, StaticBrandCatalog, resolve_brand
from .config import ReceiptConfig, load_config
from .errors import (
    AIDecodeError,
    AINotConfiguredError,
    AIResponseError,
    AITransportError,
    ExtractionError,
    ImageEncodingError,
    ReceiptError,
)
from .images import ReceiptImage, prepare_image
from .models import (
    Ice,
    ParsedReceipt,
    ParsedReceiptItem,
    ReceiptProcessingResult,
    Size,
    Sugar,
    Topping,
)
from .nutrition import NutritionEstimate, estimate_item
from .ocr import OCRTextSource, StaticTextSource, TesseractTextSource
from .parser import ReceiptParser, parse_receipt
from .processor import ReceiptProcessor
from .quota import UnlimitedUsage, UsageLimiter, WeeklyUsageLimiter
from .vision import AIExtractionClient, create_client

__all__ = [
    "ReceiptProcessor",
    "ReceiptProcessingResult",
    "ParsedReceipt",
    "ParsedReceiptItem",
    "Size",
    "Sugar",
    "Ice",
    "Topping",
    "ReceiptParser",
    "parse_receipt",
    "ReceiptImage",
    "prepare_image",
    "OCRTextSource",
    "StaticTextSource",
    "TesseractTextSource",
    "AIExtractionClient",
    "create_client",
    "UsageLimiter",
    "UnlimitedUsage",
    "WeeklyUsageLimiter",
    "Brand",
    "BrandCatalog",
    "StaticBrandCatalog",
    "resolve_brand",
    "NutritionEstimate",
    "estimate_item",
    "ReceiptConfig",
    "load_config",
    "ReceiptError",
    "ImageEncodingError",
    "ExtractionError",
    "AINotConfiguredError",
    "AITransportError",
    "AIResponseError",
    "AIDecodeError",
]
