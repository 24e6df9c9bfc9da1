"""
Function resource requirements.

Converts the memory and CPU strings of a request into Docker resource
requirements. A field that can not be parsed is dropped and recorded as a
diagnostic, it never fails the deployment.
"""

from typing import List, Optional
from fnswarm.diagnostics import Diagnostic, DiagnosticKind, record
from fnswarm.exceptions import InvalidQuantity
from fnswarm.schemas.requests import FunctionResources
from fnswarm.schemas.service_spec import ResourceRequirements, Resources
from fnswarm.utils.quantities import parse_memory_size, parse_cpu_quantity


def build_resource_group(group: FunctionResources, group_name: str,
                         diagnostics: Optional[List[Diagnostic]] = None) -> Optional[Resources]:
    """
    Parse one resource group.

    Args:
        group (FunctionResources): Memory and CPU strings.
        group_name (str): 'limits' or 'requests', used in diagnostics.
        diagnostics (Optional[List[Diagnostic]]): Collects the fields that could not be parsed.

    Returns:
        Optional[Resources]: Parsed resources, or `None` if no field could be parsed.
    """
    resources = Resources()
    value_set = False

    if group.memory:
        try:
            resources.memory_bytes = parse_memory_size(group.memory)
            value_set = True
        except InvalidQuantity as err:
            record(diagnostics, DiagnosticKind.INVALID_QUANTITY, f"{group_name}.memory", group.memory,
                   f"Error parsing memory {group_name}: {err}")

    if group.cpu:
        try:
            resources.nano_cpus = parse_cpu_quantity(group.cpu)
            value_set = True
        except InvalidQuantity as err:
            record(diagnostics, DiagnosticKind.INVALID_QUANTITY, f"{group_name}.cpu", group.cpu,
                   f"Error parsing cpu {group_name}: {err}")

    return resources if value_set else None


def build_resources(limits: Optional[FunctionResources],
                    requests: Optional[FunctionResources],
                    diagnostics: Optional[List[Diagnostic]] = None) -> Optional[ResourceRequirements]:
    """
    Build the resource requirements of a function.

    Args:
        limits (Optional[FunctionResources]): Maximum resources.
        requests (Optional[FunctionResources]): Reserved resources.
        diagnostics (Optional[List[Diagnostic]]): Collects the fields that could not be parsed.

    Returns:
        Optional[ResourceRequirements]: `None` when neither limits nor requests are given,
        otherwise the requirements holding the groups with at least one valid field.
    """
    if limits is None and requests is None:
        return None

    requirements = ResourceRequirements()
    if limits is not None:
        requirements.limits = build_resource_group(limits, "limits", diagnostics)
    if requests is not None:
        requirements.reservations = build_resource_group(requests, "requests", diagnostics)
    return requirements
