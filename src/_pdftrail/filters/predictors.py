"""
Predictors for FlateDecode and LZWDecode data (PDF 1.7, 7.4.4.4). Image
rows are predicted from earlier rows before compression, and the
prediction is undone after decompression.
"""

import numpy as np

from _pdftrail.filters.errors import FilterDecodeError, UnsupportedFilterError

# Map from bits per component to numpy dtype
# used for undoing the tiff predictor.
tiff_dtype = {
    8: np.dtype(np.uint8),
    16: np.dtype(">u2"),
}


def apply_predictor(data, parameters):
    """
    :param data: Decompressed data.
    :param parameters: The decode parameters of the filter.
    :returns: data with the prediction given by the Predictor
        parameter undone.
    """
    predictor = parameters.get("Predictor", 1)
    colors = parameters.get("Colors", 1)
    bits_per_component = parameters.get("BitsPerComponent", 8)
    columns = parameters.get("Columns", 1)

    if predictor == 1:
        return data
    if min(colors, bits_per_component, columns) <= 0:
        raise FilterDecodeError(
            f"Invalid predictor parameters Colors={colors}, "
            f"BitsPerComponent={bits_per_component}, Columns={columns}"
        )
    if predictor == 2:
        return undo_tiff_predictor(data, colors, bits_per_component, columns)
    if 10 <= predictor <= 15:
        return undo_png_predictor(data, colors, bits_per_component, columns)
    raise FilterDecodeError(f"Unknown predictor {predictor}")


def undo_tiff_predictor(data, colors, bits_per_component, columns):
    """
    Each sample is the difference from the sample of the same color
    component to its left.
    """
    if bits_per_component not in tiff_dtype:
        raise UnsupportedFilterError(
            f"TIFF predictor with {bits_per_component} bits per component "
            "is not supported. Try accessing the raw compressed data directly."
        )
    dtype = tiff_dtype[bits_per_component]
    row_length = colors * columns * dtype.itemsize
    padding = -len(data) % row_length

    samples = np.frombuffer(data + b"\0" * padding, dtype)
    samples = samples.astype(dtype.newbyteorder("=")).reshape(-1, columns, colors)
    decoded = np.cumsum(samples, axis=1, dtype=samples.dtype)
    return decoded.astype(dtype).tobytes()[: len(data)]


def paeth(left, above, upper_left):
    estimate = left + above - upper_left
    distance_left = abs(estimate - left)
    distance_above = abs(estimate - above)
    distance_upper_left = abs(estimate - upper_left)
    if distance_left <= distance_above and distance_left <= distance_upper_left:
        return left
    if distance_above <= distance_upper_left:
        return above
    return upper_left


def undo_sub(row, bytes_per_pixel):
    padding = -len(row) % bytes_per_pixel
    pixels = np.concatenate([row, np.zeros(padding, np.uint8)])
    pixels = pixels.reshape(-1, bytes_per_pixel)
    return np.cumsum(pixels, axis=0, dtype=np.uint8).ravel()[: len(row)]


def undo_average(row, prior, bytes_per_pixel):
    decoded = bytearray(len(row))
    for i, value in enumerate(row.tolist()):
        left = decoded[i - bytes_per_pixel] if i >= bytes_per_pixel else 0
        decoded[i] = (value + (left + int(prior[i])) // 2) & 0xFF
    return np.frombuffer(bytes(decoded), np.uint8)


def undo_paeth(row, prior, bytes_per_pixel):
    decoded = bytearray(len(row))
    above = prior.tolist()
    for i, value in enumerate(row.tolist()):
        if i >= bytes_per_pixel:
            left = decoded[i - bytes_per_pixel]
            upper_left = above[i - bytes_per_pixel]
        else:
            left = upper_left = 0
        decoded[i] = (value + paeth(left, above[i], upper_left)) & 0xFF
    return np.frombuffer(bytes(decoded), np.uint8)


def undo_png_predictor(data, colors, bits_per_component, columns):
    """
    Each row is preceded by a byte giving the PNG filter type used for
    that row. A truncated last row is decoded as far as it goes.
    """
    bytes_per_pixel = max(1, colors * bits_per_component // 8)
    row_length = (colors * bits_per_component * columns + 7) // 8

    previous = np.zeros(row_length, np.uint8)
    rows = []
    for start in range(0, len(data), row_length + 1):
        filter_type = data[start]
        row = np.frombuffer(data[start + 1 : start + 1 + row_length], np.uint8)
        prior = previous[: len(row)]

        if filter_type == 0:
            decoded = row
        elif filter_type == 1:
            decoded = undo_sub(row, bytes_per_pixel)
        elif filter_type == 2:
            decoded = row + prior
        elif filter_type == 3:
            decoded = undo_average(row, prior, bytes_per_pixel)
        elif filter_type == 4:
            decoded = undo_paeth(row, prior, bytes_per_pixel)
        else:
            raise FilterDecodeError(
                f"Unknown PNG filter type {filter_type} in row at {start}"
            )

        rows.append(decoded.tobytes())
        previous = np.zeros(row_length, np.uint8)
        previous[: len(decoded)] = decoded
    return b"".join(rows)
