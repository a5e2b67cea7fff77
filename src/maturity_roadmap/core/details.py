"""Implementation guidance shown in a recommendation's detail view.

Builds a suggested sequence of delivery steps and a list of success criteria
for a capability step. Guidance is category-specific where a tailored plan
exists, otherwise generic and adjusted for quick wins and large efforts.
Success criteria are tailored by impact area.
"""

from maturity_roadmap.core.models import CapabilityStep

LARGE_EFFORT_POINTS: int = 8

_CATEGORY_STEPS: dict[str, dict[str, list[str]]] = {
    "foundations_culture": {
        "en": [
            "Assess current team culture and communication patterns",
            "Identify key stakeholders and change champions",
            "Design cultural change program with clear milestones",
            "Implement pilot program with selected teams",
            "Gather feedback and iterate on the approach",
            "Scale successful practices across the organization",
            "Establish ongoing measurement and reinforcement mechanisms",
        ],
        "ja": [
            "現在のチーム文化とコミュニケーションパターンを評価",
            "主要ステークホルダーと変革推進者を特定",
            "明確なマイルストーンを持つ文化変革プログラムを設計",
            "選択されたチームでパイロットプログラムを実装",
            "フィードバックを収集しアプローチを改善",
            "成功した実践を組織全体に拡大",
            "継続的な測定と強化メカニズムを確立",
        ],
    },
    "security_compliance": {
        "en": [
            "Conduct security assessment and gap analysis",
            "Research and select appropriate security tools and frameworks",
            "Design security policies and compliance procedures",
            "Implement security controls in development environment",
            "Test security measures and validate compliance",
            "Deploy security solutions to production with monitoring",
            "Establish ongoing security review and audit processes",
        ],
        "ja": [
            "セキュリティ評価とギャップ分析を実施",
            "適切なセキュリティツールとフレームワークを調査・選択",
            "セキュリティポリシーとコンプライアンス手順を設計",
            "開発環境でセキュリティ制御を実装",
            "セキュリティ対策をテストしコンプライアンスを検証",
            "監視付きで本番環境にセキュリティソリューションを展開",
            "継続的なセキュリティレビューと監査プロセスを確立",
        ],
    },
    "cicd_practices": {
        "en": [
            "Analyze current development and deployment workflows",
            "Design CI/CD pipeline architecture and tool selection",
            "Implement automated build and test processes",
            "Set up deployment automation with proper gates",
            "Test pipeline with sample applications",
            "Train development teams on new CI/CD processes",
            "Monitor pipeline performance and continuously optimize",
        ],
        "ja": [
            "現在の開発・デプロイワークフローを分析",
            "CI/CDパイプラインアーキテクチャとツール選択を設計",
            "自動ビルドとテストプロセスを実装",
            "適切なゲートを持つデプロイ自動化を設定",
            "サンプルアプリケーションでパイプラインをテスト",
            "開発チームに新しいCI/CDプロセスをトレーニング",
            "パイプラインパフォーマンスを監視し継続的に最適化",
        ],
    },
    "observability": {
        "en": [
            "Assess current monitoring and observability gaps",
            "Select and configure monitoring, logging, and tracing tools",
            "Implement instrumentation in applications and infrastructure",
            "Set up dashboards and alerting rules",
            "Test observability stack with synthetic scenarios",
            "Train teams on using observability tools effectively",
            "Establish SLI/SLO framework and incident response procedures",
        ],
        "ja": [
            "現在の監視と可観測性のギャップを評価",
            "監視・ログ・トレーシングツールを選択・設定",
            "アプリケーションとインフラにインストルメンテーションを実装",
            "ダッシュボードとアラートルールを設定",
            "合成シナリオで可観測性スタックをテスト",
            "チームに可観測性ツールの効果的な使用方法をトレーニング",
            "SLI/SLOフレームワークとインシデント対応手順を確立",
        ],
    },
}

_GENERIC_STEPS: dict[str, list[str]] = {
    "en": [
        "Assess current state and identify gaps",
        "Research and evaluate appropriate tools and approaches",
        "Create detailed implementation plan with stakeholders",
        "Implement solution in a controlled environment",
        "Test and validate functionality and performance",
        "Roll out to broader organization with appropriate training",
        "Document processes and create operational procedures",
    ],
    "ja": [
        "現状を評価し、ギャップを特定する",
        "適切なツールとアプローチを調査・評価する",
        "ステークホルダーと詳細な実装計画を作成する",
        "制御された環境でソリューションを実装する",
        "機能とパフォーマンスをテストし検証する",
        "適切なトレーニングとともに組織全体に展開する",
        "プロセスを文書化し運用手順を作成する",
    ],
}

_QUICK_WIN_STEP_OVERRIDES: dict[str, dict[int, str]] = {
    "en": {
        0: "Quickly assess current state and identify immediate opportunities",
        2: "Create focused implementation plan for rapid deployment",
    },
    "ja": {
        0: "現状を迅速に評価し即座の機会を特定する",
        2: "迅速な展開のための集中的な実装計画を作成する",
    },
}

# (position, text) inserted in order for large efforts
_LARGE_EFFORT_INSERTS: dict[str, list[tuple[int, str]]] = {
    "en": [
        (2, "Conduct detailed risk assessment and mitigation planning"),
        (4, "Implement in phases with regular checkpoints"),
    ],
    "ja": [
        (2, "詳細なリスク評価と軽減計画を実施"),
        (4, "定期的なチェックポイントを持つ段階的実装"),
    ],
}

_IMPACT_CRITERIA: dict[str, dict[str, list[str]]] = {
    "DP": {
        "en": [
            "Development velocity increases by measurable percentage",
            "Developer satisfaction scores improve in surveys",
            "Time to deploy new features is reduced",
        ],
        "ja": [
            "開発速度が測定可能な割合で向上する",
            "開発者満足度スコアがサーベイで改善する",
            "新機能のデプロイ時間が短縮される",
        ],
    },
    "IM": {
        "en": [
            "Mean time to detection (MTTD) is reduced",
            "Mean time to recovery (MTTR) improves significantly",
            "Number of critical incidents decreases",
        ],
        "ja": [
            "平均検知時間（MTTD）が短縮される",
            "平均復旧時間（MTTR）が大幅に改善する",
            "重大インシデント数が減少する",
        ],
    },
    "IC": {
        "en": [
            "Infrastructure costs are reduced by target percentage",
            "Resource utilization efficiency improves",
            "Cost per transaction or user decreases",
        ],
        "ja": [
            "インフラコストが目標割合で削減される",
            "リソース利用効率が改善する",
            "トランザクションまたはユーザーあたりのコストが減少する",
        ],
    },
    "OE": {
        "en": [
            "Manual operational tasks are reduced significantly",
            "Operational team productivity increases",
            "System maintenance overhead decreases",
        ],
        "ja": [
            "手動運用タスクが大幅に削減される",
            "運用チームの生産性が向上する",
            "システムメンテナンスのオーバーヘッドが減少する",
        ],
    },
    "TM": {
        "en": [
            "Feature delivery time is reduced measurably",
            "Release frequency increases without quality degradation",
            "Time from idea to production deployment decreases",
        ],
        "ja": [
            "機能提供時間が測定可能に短縮される",
            "品質低下なしにリリース頻度が向上する",
            "アイデアから本番デプロイまでの時間が短縮される",
        ],
    },
}

_BASE_CRITERIA: dict[str, list[str]] = {
    "en": [
        "Implementation is completed within the specified timeline",
        "The solution is adopted by relevant teams and stakeholders",
        "Key metrics show improvement in the target area",
        "Documentation and operational procedures are in place",
        "Relevant assessment scores improve by at least 15 points",
    ],
    "ja": [
        "指定されたタイムライン内で実装が完了する",
        "関連するチームとステークホルダーがソリューションを採用する",
        "主要メトリクスが対象領域で改善を示す",
        "文書化と運用手順が整備される",
        "関連する評価スコアが少なくとも15ポイント改善する",
    ],
}

_QUICK_WIN_CRITERIA: dict[str, tuple[str, str]] = {
    "en": (
        "Quick win is delivered within 2-4 weeks",
        "Immediate value is demonstrated to stakeholders",
    ),
    "ja": (
        "クイックウィンが2-4週間以内に提供される",
        "ステークホルダーに即座の価値が実証される",
    ),
}


def _lang(language: str) -> str:
    return "ja" if language == "ja" else "en"


def implementation_steps(step: CapabilityStep, language: str = "en") -> list[str]:
    """Return suggested delivery steps for a capability step.

    Args:
        step: Capability step being detailed.
        language: 'en' or 'ja'; anything else falls back to English.

    Returns:
        Ordered list of delivery steps.
    """
    lang = _lang(language)
    tailored = _CATEGORY_STEPS.get(step.category)
    if tailored is not None:
        return list(tailored[lang])

    steps = list(_GENERIC_STEPS[lang])
    if step.quick_win:
        for position, text in _QUICK_WIN_STEP_OVERRIDES[lang].items():
            steps[position] = text
    if step.effort_points >= LARGE_EFFORT_POINTS:
        for position, text in _LARGE_EFFORT_INSERTS[lang]:
            steps.insert(position, text)
    return steps


def success_criteria(step: CapabilityStep, language: str = "en") -> list[str]:
    """Return success criteria tailored to the step's impact area."""
    lang = _lang(language)
    criteria = list(_BASE_CRITERIA[lang])

    impact_specific = _IMPACT_CRITERIA.get(step.impact_area)
    if impact_specific is not None:
        first, *more = impact_specific[lang]
        criteria[2] = first
        criteria.extend(more)

    if step.quick_win:
        delivered, demonstrated = _QUICK_WIN_CRITERIA[lang]
        criteria[0] = delivered
        criteria.append(demonstrated)
    return criteria
