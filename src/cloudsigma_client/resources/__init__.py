"""Resource services and their data transfer objects."""
from .acls import ACL, ACLRule, ACLsResource
from .capabilities import Capabilities, CapabilitiesResource
from .cloud_status import CloudStatus, CloudStatusResource
from .drives import Drive, DriveCloneRequest, DriveLicense, DrivesResource
from .firewall_policies import FirewallPoliciesResource, FirewallPolicy, FirewallPolicyRule
from .ips import IP, IPsResource
from .keypairs import Keypair, KeypairsResource
from .library_drives import LibraryDrive, LibraryDrivesResource
from .licenses import License, LicensesResource
from .locations import Location, LocationsResource
from .profile import Profile, ProfileResource
from .pubkeys import PubkeysResource
from .remote_snapshots import RemoteSnapshot, RemoteSnapshotDriveMetadata, RemoteSnapshotsResource
from .servers import (
    Server,
    ServerAction,
    ServerDrive,
    ServerIPConfiguration,
    ServerNIC,
    ServersResource,
)
from .snapshots import Snapshot, SnapshotsResource
from .subscriptions import Subscription, SubscriptionsResource
from .tags import TagsResource
from .vlans import VLAN, VLANsResource, VLANSubscription

__all__ = [
    "ACL",
    "ACLRule",
    "ACLsResource",
    "Capabilities",
    "CapabilitiesResource",
    "CloudStatus",
    "CloudStatusResource",
    "Drive",
    "DriveCloneRequest",
    "DriveLicense",
    "DrivesResource",
    "FirewallPoliciesResource",
    "FirewallPolicy",
    "FirewallPolicyRule",
    "IP",
    "IPsResource",
    "Keypair",
    "KeypairsResource",
    "LibraryDrive",
    "LibraryDrivesResource",
    "License",
    "LicensesResource",
    "Location",
    "LocationsResource",
    "Profile",
    "ProfileResource",
    "PubkeysResource",
    "RemoteSnapshot",
    "RemoteSnapshotDriveMetadata",
    "RemoteSnapshotsResource",
    "Server",
    "ServerAction",
    "ServerDrive",
    "ServerIPConfiguration",
    "ServerNIC",
    "ServersResource",
    "Snapshot",
    "SnapshotsResource",
    "Subscription",
    "SubscriptionsResource",
    "TagsResource",
    "VLAN",
    "VLANSubscription",
    "VLANsResource",
]
