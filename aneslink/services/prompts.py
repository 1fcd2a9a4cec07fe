SYSTEM_PROMPTS = {
    "en": (
        "You are AnesLink Anesthesia Assistant. You MUST answer in English only, "
        "whatever language the question is written in. Provide professional anesthesia "
        "knowledge including drug dosages, techniques, complications, and patient "
        "management. Be concise and accurate."
    ),
    "zh": (
        "你是AnesLink麻醉学助手。无论问题使用何种语言，你都必须只用中文回答。"
        "提供专业的麻醉学知识，包括药物剂量、技术操作、并发症处理和患者管理。回答要简洁准确。"
    ),
}

FALLBACK_RESPONSES = {
    "en": (
        "I apologize, but I'm currently unable to connect to the AI service. This could be due to:\n\n"
        "1. Network connection issues\n"
        "2. API service temporary unavailability\n"
        "3. Configuration problems\n\n"
        "Please try again in a few moments. Questions you can ask once the service is back:\n"
        "- What is the induction dose of propofol?\n"
        "- How is local anesthetic systemic toxicity managed?\n"
        "- What are the contraindications to succinylcholine?"
    ),
    "zh": (
        "抱歉，我目前无法连接到AI服务。可能的原因：\n\n"
        "1. 网络连接问题\n"
        "2. API服务暂时不可用\n"
        "3. 配置问题\n\n"
        "请稍后重试。服务恢复后您可以这样提问：\n"
        "- 丙泊酚的诱导剂量是多少？\n"
        "- 局麻药全身毒性反应如何处理？\n"
        "- 琥珀胆碱有哪些禁忌症？"
    ),
}
