"""Local table of common selectors, used to label actions in diagnostics.

Lookups for selectors missing here fall through to the Sourcify 4byte API
when signature resolution is enabled.
"""

# selector -> function signature
KNOWN_SELECTORS: dict[str, str] = {
    # Access control
    "0x2f2ff15d": "grantRole(bytes32,address)",
    "0xd547741f": "revokeRole(bytes32,address)",
    "0x36568abe": "renounceRole(bytes32,address)",
    # ERC20
    "0xa9059cbb": "transfer(address,uint256)",
    "0x095ea7b3": "approve(address,uint256)",
    "0x23b872dd": "transferFrom(address,address,uint256)",
    "0x40c10f19": "mint(address,uint256)",
    "0x42966c68": "burn(uint256)",
    # Proxy / upgrades
    "0x3659cfe6": "upgradeTo(address)",
    "0x4f1ef286": "upgradeToAndCall(address,bytes)",
    # Ownable
    "0xf2fde38b": "transferOwnership(address)",
    # Pausable
    "0x8456cb59": "pause()",
    "0x3f4ba83a": "unpause()",
    # Governance admin
    "0xe177246e": "setDelay(uint256)",
    "0x64d62353": "updateDelay(uint256)",
}
