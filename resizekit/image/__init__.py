"""
Image handling for resizekit: metadata, orientation, resize geometry and resampling.
"""
from .formatted import FormattedImage, find_format
from .orientation import OrientationResolver, OrientationTransform
from .resize_policy import calculate_target_location_and_bounds
from .resampler import PillowResampler

__all__ = [
    'FormattedImage',
    'find_format',
    'OrientationResolver',
    'OrientationTransform',
    'calculate_target_location_and_bounds',
    'PillowResampler',
]
