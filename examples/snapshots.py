"""Example: VM snapshots

Snapshots a VM, schedules weekly snapshots and lists what exists.
"""

import asyncio
import sys

from vpsie import AsyncVpsieClient


async def main(vm_identifier: str):
    async with AsyncVpsieClient() as client:
        await client.snapshots.create("before-maintenance", vm_identifier)

        await client.snapshots.enable_auto(
            vm_identifier=vm_identifier,
            period="weekly",
            weekly_snapshot=4,
            tags=["example"],
        )

        offset = 0
        while True:
            page = await client.snapshots.list_by_vm(vm_identifier, offset=offset, limit=20)
            for snap in page.items:
                print(f"{snap.identifier}  {snap.name:<30} {snap.state}")
            offset += len(page.items)
            if not page.items or offset >= page.total:
                break


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1]))
