"""Pydantic models for the OpenShift Infrastructure config resource."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# The Infrastructure config resource is a singleton with this name
INFRASTRUCTURE_NAME = "cluster"


class PlatformType(str, Enum):
    """Platform types known to OpenShift (``status.platformStatus.type``)."""

    AWS = "AWS"
    AZURE = "Azure"
    BAREMETAL = "BareMetal"
    GCP = "GCP"
    LIBVIRT = "Libvirt"
    OPENSTACK = "OpenStack"
    NONE = "None"
    VSPHERE = "VSphere"
    OVIRT = "oVirt"
    IBMCLOUD = "IBMCloud"
    KUBEVIRT = "KubeVirt"
    EQUINIX_METAL = "EquinixMetal"
    POWERVS = "PowerVS"
    ALIBABA_CLOUD = "AlibabaCloud"
    NUTANIX = "Nutanix"
    EXTERNAL = "External"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in cls._value2member_map_


class PlatformStatus(BaseModel):
    """Structured platform status (the authoritative platform type)."""

    type: str | None = Field(None, description="Platform type")


class InfrastructureStatus(BaseModel):
    """Status of the Infrastructure resource."""

    platform: str | None = Field(None, description="Deprecated platform type")
    platform_status: PlatformStatus | None = Field(
        None, description="Structured platform status"
    )
    infrastructure_name: str | None = Field(None, description="Unique cluster identifier")
    api_server_url: str | None = Field(None, description="External API server URL")
    api_server_internal_uri: str | None = Field(None, description="Internal API server URI")
    control_plane_topology: str | None = Field(None, description="Control plane topology")
    infrastructure_topology: str | None = Field(None, description="Infrastructure topology")

    @classmethod
    def from_dict(cls, status: dict[str, Any]) -> "InfrastructureStatus":
        """Create from the camelCase status mapping of the resource."""
        platform_status = status.get("platformStatus")
        return cls(
            platform=status.get("platform") or None,
            platform_status=(
                PlatformStatus(type=platform_status.get("type"))
                if isinstance(platform_status, dict)
                else None
            ),
            infrastructure_name=status.get("infrastructureName"),
            api_server_url=status.get("apiServerURL"),
            api_server_internal_uri=status.get("apiServerInternalURI"),
            control_plane_topology=status.get("controlPlaneTopology"),
            infrastructure_topology=status.get("infrastructureTopology"),
        )


class Infrastructure(BaseModel):
    """The cluster-scoped Infrastructure resource (read-only)."""

    name: str = Field(INFRASTRUCTURE_NAME, description="Resource name")
    status: InfrastructureStatus | None = Field(None, description="Resource status")

    @property
    def legacy_platform(self) -> str | None:
        """The deprecated ``status.platform`` value, if set."""
        return self.status.platform if self.status else None

    @property
    def platform_type(self) -> str | None:
        """The ``status.platformStatus.type`` value, if set."""
        if self.status and self.status.platform_status:
            return self.status.platform_status.type
        return None

    @classmethod
    def from_k8s(cls, resource: Any) -> "Infrastructure":
        """Create from a Kubernetes resource.

        Accepts a dynamic client ResourceInstance or a plain dict as
        returned by the API.
        """
        data = resource.to_dict() if hasattr(resource, "to_dict") else dict(resource)
        metadata = data.get("metadata") or {}
        status = data.get("status")

        return cls(
            name=metadata.get("name") or INFRASTRUCTURE_NAME,
            status=InfrastructureStatus.from_dict(status) if isinstance(status, dict) else None,
        )
