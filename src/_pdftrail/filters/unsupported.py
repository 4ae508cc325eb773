from _pdftrail.filters.base import UnsupportedFilter


class JpxDecodeFilter(UnsupportedFilter):
    name = "JPXDecode"
    description = "JPEG2000 image data"


class Jbig2DecodeFilter(UnsupportedFilter):
    name = "JBIG2Decode"
    description = "JBIG2 monochrome image data"


class DctDecodeFilter(UnsupportedFilter):
    name = "DCTDecode"
    description = "JPEG image data"


class CcittFaxDecodeFilter(UnsupportedFilter):
    name = "CCITTFaxDecode"
    description = "CCITT Group 3 and 4 fax image data"


class CryptFilter(UnsupportedFilter):
    name = "Crypt"
    description = "encrypted data"
