from gitness.schemas.common import ApiModel


class SystemUI(ApiModel):
    show_plugin: bool | None = None


class SystemConfig(ApiModel):
    artifact_registry_enabled: bool | None = None
    gitspace_enabled: bool | None = None
    ldap_enabled: bool | None = None
    oidc_enabled: bool | None = None
    public_resource_creation_enabled: bool | None = None
    ssh_enabled: bool | None = None
    ui: SystemUI | None = None
    user_signup_allowed: bool | None = None
