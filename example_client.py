"""
stdio로 서버를 실행하고 도구를 호출해 보는 예제 클라이언트

사용법: python example_client.py <table> [schema]
"""

import sys

import anyio
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def run(table: str, schema: str):
    params = StdioServerParameters(command=sys.executable, args=["main.py"])
    async with stdio_client(params) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            # 도구 목록
            tools = await session.list_tools()
            print("사용 가능한 도구:")
            for tool in tools.tools:
                print(f"  - {tool.name}: {tool.description}")

            # 테이블 조회
            result = await session.call_tool("query_table", {"schema": schema, "table": table})
            print(f"\n{schema}.{table} 조회 결과{' (오류)' if result.isError else ''}:")
            for content in result.content:
                print(content.text)


def main():
    if len(sys.argv) < 2:
        print(__doc__.strip(), file=sys.stderr)
        return 1
    table = sys.argv[1]
    schema = sys.argv[2] if len(sys.argv) > 2 else "public"
    try:
        anyio.run(run, table, schema)
    except Exception as e:
        print(f"오류 발생: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
