"""
Function labels.

Merges the system labels, the user labels and the annotations of a function
request into the labels of the Docker service.
"""

from typing import Dict, Optional
from fnswarm.exceptions import LabelAnnotationConflict


FUNCTION_LABEL = "com.openfaas.function"
ANNOTATION_LABEL_PREFIX = "com.openfaas.annotations."


def build_labels(service: str,
                 labels: Optional[Dict[str, str]] = None,
                 annotations: Optional[Dict[str, str]] = None,
                 annotation_prefix: str = ANNOTATION_LABEL_PREFIX,
                 function_label: str = FUNCTION_LABEL) -> Dict[str, str]:
    """
    Merge system labels, user labels and annotations.

    User labels are copied verbatim and may overwrite the system labels.
    Annotations are stored under `annotation_prefix` + key and must not clash with a label.

    Args:
        service (str): Function name.
        labels (Optional[Dict[str, str]]): User labels.
        annotations (Optional[Dict[str, str]]): User annotations.
        annotation_prefix (str): Prefix of annotation labels.
        function_label (str): Label identifying the function.

    Returns:
        Dict[str, str]: Merged labels.

    Raises:
        LabelAnnotationConflict: If a prefixed annotation key is already used as a label.
    """
    merged = {
        function_label: service,
        "function": "true",  # backwards-compatible
    }

    if labels:
        merged.update(labels)

    if annotations:
        for key, value in annotations.items():
            label_key = f"{annotation_prefix}{key}"
            if label_key in merged:
                raise LabelAnnotationConflict(key, label_key)
            merged[label_key] = value

    return merged
