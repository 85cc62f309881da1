"""手动测试：发送一条模板消息"""
import argparse
import asyncio
import sys
from pathlib import Path

# 添加项目根目录到路径
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

from wechat_template import (
    HttpxApiRequester,
    StaticAccessTokenProvider,
    TemplateMessageService,
    load_official_options,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="发送一条公众号模板消息")
    parser.add_argument("open_id", help="接收者 OpenId")
    parser.add_argument("template_id", help="模板 ID")
    parser.add_argument("data", help='模板数据 JSON，例如 \'{"first": {"value": "你好"}}\'')
    parser.add_argument("--url", default=None, help="点击消息后跳转的链接")
    parser.add_argument("--list-templates", action="store_true", help="发送前先列出已有模板")
    return parser.parse_args()


async def main() -> int:
    args = _parse_args()
    options = load_official_options()

    if not options.access_token:
        print("❌ 错误：未配置 WECHAT_MP_ACCESS_TOKEN")
        print("\n请在 .env 文件中配置：")
        print("WECHAT_MP_ACCESS_TOKEN=your_access_token")
        return 1

    service = TemplateMessageService(HttpxApiRequester(StaticAccessTokenProvider()), options)

    if args.list_templates:
        templates = await service.get_all_private_template()
        for tpl in templates.template_list:
            print(f"- {tpl.template_id}: {tpl.title}")

    result = await service.send_message_json(args.open_id, args.template_id, args.url, args.data)
    if result.is_success():
        print(f"✅ 发送成功，msgid: {result.msgid}")
        return 0

    print(f"❌ 发送失败: [{result.errcode}] {result.errmsg}")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
