"""RAW sample corpus used by the conversion tests.

Samples come from the raw.pixls.us archive. Each asset is pinned by SHA-1 so a
changed upstream file is never silently accepted.
"""

from dataclasses import dataclass
from pathlib import PurePath
from urllib.parse import quote

# Extension -> MIME type sent with the upload
RAW_MIME_TYPES: dict[str, str] = {
    ".nef": "image/x-nikon-nef",
    ".cr2": "image/x-canon-cr2",
    ".dng": "image/x-adobe-dng",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".raf": "image/x-fuji-raf",
    ".3fr": "image/x-hasselblad-3fr",
}

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FixtureAsset:
    """One downloadable test input."""

    source_url: str
    file_name: str  # Local cache name and file-store name
    expected_digest: str  # SHA-1 hex of the content

    @property
    def content_type(self) -> str:
        suffix = PurePath(self.file_name).suffix.lower()
        return RAW_MIME_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)

    @property
    def download_url(self) -> str:
        """Source URL with spaces percent-encoded."""
        return self.source_url.replace(" ", quote(" "))


RAW_ASSETS: tuple[FixtureAsset, ...] = (
    FixtureAsset(
        source_url="https://raw.pixls.us/data/Nikon/D600/DSC_3297.NEF",
        file_name='Фото".NEF',
        expected_digest="607599813cc5ea65e81595e07955a51f281bf0b7",
    ),
    FixtureAsset(
        source_url="https://raw.pixls.us/data/Canon/EOS 50D/IMG_9518.CR2",
        file_name="Canon_EOS_50D.CR2",
        expected_digest="eea0eaa8bf907d483b6234eab001fdc85848c80b",
    ),
    FixtureAsset(
        source_url=(
            "https://raw.pixls.us/data/Adobe DNG Converter/Canon EOS 5D Mark III/"
            "5G4A9395-compressed-lossless.DNG"
        ),
        file_name="Canon_EOS_5D_Mark_III.compressed-lossless.DNG",
        expected_digest="a18d4dae67cfc0a9673c01b2d4f14fab4be68580",
    ),
    FixtureAsset(
        source_url="https://raw.pixls.us/data/Canon/EOS D2000C/RAW_CANON_D2000.TIF",
        file_name="Canon_EOS_2000C.TIF",
        expected_digest="b68b5c7d4b944fff0ad9d28e68f405f957429c49",
    ),
    FixtureAsset(
        source_url="https://raw.pixls.us/data/Fujifilm/X-A1/DSCF2482.RAF",
        file_name="Fujifilm_X-A1_DSCF2482.RAF",
        expected_digest="82e625be5689bbd08a08dd9a9c5d38e21c80bf33",
    ),
    FixtureAsset(
        source_url="https://raw.pixls.us/data/Hasselblad/CF132/RAW_HASSELBLAD_IXPRESS_CF132.3FR",
        file_name="Hasselblad_CF132.3FR",
        expected_digest="bcaa4c329711a8effb59682a99df3f2b15009d87",
    ),
)
